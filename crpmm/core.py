import logging
import numbers
from collections import OrderedDict
from typing import Iterable
import numpy as np

from .dataclass import Corpus, check_document
from .distributions import table_prior
from .sampling import sample
from .state import State
from .utils import check_random_state, check_concentration

logger = logging.getLogger(__name__)


class Gibbs(object):
    r'''
    Records the samples of a Gibbs chain, one entry per sweep.

    `CRPMM.fit` records three series per sweep: 'z', the table id of each
    document in corpus order, 'K', the number of occupied tables, and
    'log_joint', the log joint probability of seating and words.
    '''
    def __init__(self):
        self._samples = OrderedDict()
        self.step_count = 0

    @property
    def nparams(self):
        return len(self._samples)

    def __dir__(self) -> Iterable[str]:
        return list(self._samples.keys())

    def __repr__(self) -> str:
        output = "{}(sweeps={})\n".format(self.__class__.__name__, self.step_count)
        for name, samples in self._samples.items():
            output += " last {} = {}\n".format(name, samples[-1])
        return output

    def __len__(self) -> int:
        return self.step_count

    def __call__(self, params):
        return self.step(params)

    def get_chain(self,burn_rate:float=0,skip_rate=1,flatten=False):
        """
        Stack each recorded series over sweeps.

        burn_rate : fraction of the earliest sweeps to drop
        skip_rate : keep every `skip_rate`-th sweep after burn-in
        flatten : reshape each series to (sweeps, -1)

        Returns {name: array}; for a fitted `CRPMM`, chain['z'] is
        (sweeps, documents), chain['K'] and chain['log_joint'] are (sweeps,).
        Table ids in 'z' are not relabelled between sweeps.
        """
        chain = {}
        skip_rate = int(max(skip_rate,1))
        for p in self._samples:
            num_samples = len(self._samples[p])
            burn_in = int(num_samples * burn_rate)
            stacked = np.stack(self._samples[p][burn_in::skip_rate],0)
            if flatten is True:
                stacked = stacked.reshape(stacked.shape[0],-1)
            chain[p] = stacked.copy()
        return chain

    def step(self,params):
        """Append a copy of each (name, value) pair in `params` as one sweep."""
        for name,value in params:
            if name not in self._samples.keys():
                self._samples[name] = []
            self._samples[name].append(np.array(value, copy=True))
        self.step_count += 1


def initialize(corpus, alpha, beta, scheme='log', seed=None):
    """
    Initialize state so that each document is seated at its own table.

    Parameters
    ----------
        corpus : {doc_id: [word, ...], ...} or Corpus
        alpha : concentration parameter for table sizes, > 0
        beta : concentration parameter for table word distributions, > 0
        scheme : 'log' (default) or 'linear' weighting
        seed : seed or numpy random source used by later reseats
    Returns
    -------
        State
    """
    if not isinstance(corpus, Corpus):
        corpus = Corpus(corpus)

    state = State(alpha=alpha, beta=beta, W=corpus.W, scheme=scheme, seed=seed)
    state.vocab = corpus.vocab.copy()
    for doc_id in corpus:
        state.add(doc_id, corpus[doc_id], state.next_id)

    logger.info("initialized %d documents at their own tables, W=%d, alpha=%g, beta=%g, %s weighting",
                state.total_docs, state.W, state.alpha, state.beta, state.scheme.name)
    return state


def _check_vocabulary(words, state):
    # With W == 0 the first predictive denominator is zero.
    if state.W == 0 and len(words) > 0:
        raise ValueError("state has an empty vocabulary (W=0) but the document has {} words; "
                         "initialize with a corpus containing every word".format(len(words)))


def table_weights(words, state):
    """
    Unnormalized weights of seating `words` at every occupied table and at a
    new table, keyed by table id. The new table uses `state.next_id`.
    """
    _check_vocabulary(words, state)
    scheme = state.scheme
    weights = OrderedDict()
    for table_id in sorted(state.tables):
        table = state.tables[table_id]
        weights[table_id] = scheme.weight(words, table.num_docs, table.word_counts, table.num_words, state)

    # add an entry for an unoccupied table
    weights[state.next_id] = scheme.weight(words, 0, {}, 0, state)
    return weights


def reseat(document_id, corpus, state, random_state=None):
    """
    Sample a new table for document `document_id`, updating `state` in place.

    Returns the id of the table the document now sits at.
    """
    if document_id not in corpus:
        raise KeyError("document '{}' is not in the corpus".format(document_id))
    words = check_document(document_id, corpus[document_id])
    _check_vocabulary(words, state)

    if random_state is None:
        random_state = state.random_state
    else:
        random_state = check_random_state(random_state)

    if document_id in state.assignments:
        state.remove(document_id, words)

    weights = table_weights(words, state)
    table_id = state.scheme.sample(weights, random_state)

    state.add(document_id, words, table_id)
    logger.debug("seated document %s at table %s of %d candidates", document_id, table_id, len(weights))
    return table_id


class ChineseRestaurantProcess(object):
    r'''
    Chinese restaurant process over bare counts, for generation.

    Customers are seated one at a time; tables are numbered 0, 1, 2, ...
    in order of opening.
    '''
    def __init__(self,alpha=1,random_state=None):
        self.alpha = alpha
        self.random_state = check_random_state(random_state)
        self.reset()

    @property
    def alpha(self):
        return self._alpha
    @alpha.setter
    def alpha(self,value):
        self._alpha = check_concentration(value, 'alpha')

    @property
    def K(self):
        return len(self.counts)

    def reset(self):
        self.counts = {}
        self.N = 0

    def sample(self):
        table_probs = {}
        for table in self.counts:
            table_probs[table] = table_prior(self.counts[table], self.N, self.alpha)

        # add probability for a new, unoccupied table
        table_probs[self.K] = table_prior(0, self.N, self.alpha)

        z = sample(table_probs, self.random_state)
        self.counts[z] = self.counts.get(z, 0) + 1
        self.N += 1
        return z


def simulate_crp(n, alpha, random_state=None):
    """
    Seat `n` customers by the CRP prior alone. Returns {table_id: count, ...}.
    """
    if not isinstance(n, numbers.Integral) or n < 0:
        raise ValueError("number of customers must be a non-negative integer, got {}".format(n))
    crp = ChineseRestaurantProcess(alpha=alpha, random_state=random_state)
    for i in range(n):
        crp.sample()
    return dict(crp.counts)
