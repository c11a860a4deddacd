import logging
import numpy as np
from scipy.special import logsumexp

from .distributions import table_prior, log_table_prior, word_likelihood, log_word_likelihood
from .utils import check_random_state

logger = logging.getLogger(__name__)


def _candidates(weights):
    if len(weights) == 0:
        raise ValueError("cannot sample from an empty set of weights")
    # Ascending table id, so the new-table candidate (next_id) is walked last.
    keys = sorted(weights)
    values = np.array([weights[k] for k in keys], dtype=float)
    return keys, values


def sample(weights, random_state=None):
    """
    Draw a key with probability proportional to its weight.

    Parameters
    ----------
        weights : {key: unnormalized probability, ...}
        random_state : seed or numpy random source.
    Returns
    -------
        The sampled key. If every weight underflowed to zero, the last key.
    """
    random_state = check_random_state(random_state)
    keys, values = _candidates(weights)

    total = values.sum()
    if total <= 0:
        logger.warning("all %d weights are zero (linear-space underflow), "
                       "returning the last candidate", len(keys))
    threshold = random_state.random() * total
    for key, value in zip(keys, values):
        threshold -= value
        if threshold < 0:
            return key
    return keys[-1]


def log_sample(log_weights, random_state=None):
    """
    Draw a key with probability proportional to exp(log weight).

    The log normalization constant is computed with log-sum-exp, so very
    negative log likelihoods from long documents do not underflow. If rounding
    leaves the cumulative probability short of the draw, the last key wins.
    """
    random_state = check_random_state(random_state)
    keys, values = _candidates(log_weights)

    max_log = values.max()
    if not np.isfinite(max_log):
        logger.warning("log weights have no finite maximum (%s), returning the last candidate", max_log)
        return keys[-1]

    log_norm_const = logsumexp(values)
    with np.errstate(divide='ignore'):
        log_u = np.log(random_state.random())
        sum_of_exp = 0.0
        for key, value in zip(keys, values):
            sum_of_exp += np.exp(value - max_log)
            log_cumulative_prob = max_log + np.log(sum_of_exp) - log_norm_const
            if log_cumulative_prob > log_u:
                return key
    return keys[-1]


class WeightingScheme(object):
    r'''
    How table weights are computed, combined and sampled.

    Both schemes compute the same quantities; `LogWeighting` does so in
    log-probability space and is the one to use on real corpora.
    '''
    name = None

    def table_prior(self, count, total, alpha):
        raise NotImplementedError

    def word_likelihood(self, words, word_counts, word_total, beta, W):
        raise NotImplementedError

    def combine(self, prior, likelihood):
        raise NotImplementedError

    def sample(self, weights, random_state=None):
        raise NotImplementedError

    def weight(self, words, count, word_counts, word_total, state):
        prior = self.table_prior(count, state.total_docs, state.alpha)
        likelihood = self.word_likelihood(words, word_counts, word_total, state.beta, state.W)
        return self.combine(prior, likelihood)

    def __repr__(self) -> str:
        return self.__class__.__name__ + "()"


class LinearWeighting(WeightingScheme):
    r'''
    Weights as plain probabilities. Underflows on long documents or large
    vocabularies, so only suitable for small inputs.
    '''
    name = 'linear'

    def table_prior(self, count, total, alpha):
        return table_prior(count, total, alpha)

    def word_likelihood(self, words, word_counts, word_total, beta, W):
        return word_likelihood(words, word_counts, word_total, beta, W)

    def combine(self, prior, likelihood):
        return prior * likelihood

    def sample(self, weights, random_state=None):
        return sample(weights, random_state)


class LogWeighting(WeightingScheme):
    name = 'log'

    def table_prior(self, count, total, alpha):
        return log_table_prior(count, total, alpha)

    def word_likelihood(self, words, word_counts, word_total, beta, W):
        return log_word_likelihood(words, word_counts, word_total, beta, W)

    def combine(self, prior, likelihood):
        return prior + likelihood

    def sample(self, weights, random_state=None):
        return log_sample(weights, random_state)


SCHEMES = {
    LinearWeighting.name: LinearWeighting,
    LogWeighting.name: LogWeighting,
}


def get_scheme(scheme='log'):
    if isinstance(scheme, WeightingScheme):
        return scheme
    if scheme not in SCHEMES:
        raise ValueError("unknown weighting scheme '{}', expected one of {}".format(scheme, sorted(SCHEMES)))
    return SCHEMES[scheme]()
