#%%
import logging
import numpy as np
from scipy.stats import dirichlet
from tqdm import tqdm

from .core import Gibbs, ChineseRestaurantProcess, initialize, reseat
from .dataclass import Corpus
from .distributions import log_joint
from .sampling import get_scheme
from .utils import check_random_state, check_concentration, plot_table_sizes

logger = logging.getLogger(__name__)


class CRPMM(object):
    r'''
    Chinese restaurant process mixture model for document clustering.

    An infinite mixture model for documents, in which each document sits at a
    table and a table-specific unigram language model generates the words in
    the document. Table word distributions are integrated out, so inference is
    collapsed Gibbs sampling over the seating alone.

    Examples
    --------
    Import package
    >>> from crpmm import CRPMM

    Create model and generate a corpus from it
    >>> model = CRPMM(alpha=1, beta=.5, seed=1)
    >>> corpus, labels = model.generate(n=50, W=30, doc_length=20)

    Fit the model to the corpus using the Gibbs sampler.
    >>> model.fit(corpus, sweeps=20)
    >>> model.plot()

    '''
    def __init__(self,alpha=1.0,beta=.5,scheme='log',seed=None):
        self.alpha = alpha
        self.beta = beta
        self.scheme = get_scheme(scheme)
        self.random_state = check_random_state(seed)
        self.corpus = None
        self.state = None
        self.chain = Gibbs()

    @property
    def alpha(self):
        return self._alpha
    @alpha.setter
    def alpha(self,value):
        self._alpha = check_concentration(value, 'alpha')

    @property
    def beta(self):
        return self._beta
    @beta.setter
    def beta(self,value):
        self._beta = check_concentration(value, 'beta')

    @property
    def K(self):
        if self.state is None:
            return 0
        return self.state.K

    @property
    def labels(self) -> np.ndarray:
        """Table id of every document, in corpus order."""
        assignments = self.state.assignments
        return np.array([assignments[doc_id] for doc_id in self.corpus], dtype=int)

    def initialize(self,corpus):
        self.corpus = corpus if isinstance(corpus, Corpus) else Corpus(corpus)
        self.state = initialize(self.corpus, self.alpha, self.beta, scheme=self.scheme, seed=self.random_state)
        self.chain = Gibbs()

    def sample_tables(self):
        doc_ids = list(self.corpus)
        tau = self.random_state.permutation(len(doc_ids))
        for n in tau:
            reseat(doc_ids[n], self.corpus, self.state)

    def named_parameters(self):
        yield 'z', self.labels
        yield 'K', np.array(self.K)
        yield 'log_joint', np.array(log_joint(self.state))

    def fit(self,corpus,sweeps=100):
        self.initialize(corpus)
        for iter in tqdm(range(sweeps)):
            self.sample_tables()
            self.chain.step(self.named_parameters())
        logger.info("fit %d sweeps: %d tables, log joint %.2f", sweeps, self.K, log_joint(self.state))
        return self

    def generate(self,n=100,W=50,doc_length=20):
        """
        Sample a corpus from the model.

        Returns
        -------
            corpus : {doc_id: [word, ...], ...} with words 'w0' ... 'w{W-1}'
            labels : {doc_id: table, ...}, the sampled seating
        """
        if W < 1:
            raise ValueError("vocabulary size must be positive, got {}".format(W))
        doc_length = np.broadcast_to(np.asarray(doc_length, dtype=int), (n,))
        if np.any(doc_length < 0):
            raise ValueError("document lengths must be non-negative")

        crp = ChineseRestaurantProcess(alpha=self.alpha, random_state=self.random_state)
        vocab = np.array(['w{}'.format(w) for w in range(W)])

        phi = []
        corpus = {}
        labels = {}
        for i in range(n):
            z = crp.sample()
            if z == len(phi):
                theta = dirichlet.rvs(np.ones(W)*self.beta, random_state=self.random_state).ravel()
                phi.append(theta / theta.sum())
            words = self.random_state.choice(W, size=doc_length[i], p=phi[z])
            doc_id = 'd{}'.format(i)
            corpus[doc_id] = vocab[words].tolist()
            labels[doc_id] = z
        return corpus, labels

    def plot(self,figsize=(5,3)):
        return plot_table_sizes(self.state, figsize=figsize)
