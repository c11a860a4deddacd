import numpy as np
from scipy.special import gammaln


def table_prior(count, total, alpha):
    """
    CRP probability of joining a table.

    count : number of documents at the table (0 for an unoccupied table)
    total : number of seated documents, excluding the one being placed
    alpha : concentration parameter for table sizes
    """
    if count > 0:
        return count / (total + alpha)
    else:
        return alpha / (total + alpha)


def log_table_prior(count, total, alpha):
    if count > 0:
        return float(np.log(count / (total + alpha)))
    else:
        return float(np.log(alpha / (total + alpha)))


def _predictive_terms(words, word_counts, word_total, beta, W):
    # One factor per word position; repeated words see their earlier copies.
    numerator = np.zeros(len(words))
    local_counts = {}
    for j, word in enumerate(words):
        local_count = local_counts.get(word, 0)
        local_counts[word] = local_count + 1
        numerator[j] = word_counts.get(word, 0) + local_count + beta
    denominator = np.arange(len(words)) + word_total + W * beta
    return numerator / denominator


def word_likelihood(words, word_counts, word_total, beta, W):
    """
    Dirichlet-multinomial predictive probability of `words` given a table.

    words : sequence of word tokens
    word_counts : {word: count, ...}, current word counts for the table
    word_total : current total number of words at the table
    beta : concentration parameter for table word distributions
    W : vocabulary size

    Underflows to zero for long documents, see `log_word_likelihood`.
    """
    return float(np.prod(_predictive_terms(words, word_counts, word_total, beta, W)))


def log_word_likelihood(words, word_counts, word_total, beta, W):
    return float(np.sum(np.log(_predictive_terms(words, word_counts, word_total, beta, W))))


def log_joint(state):
    r'''
    Log joint probability of the current seating and of every seated word.

    log p(z) = K log(alpha) + gammaln(alpha) - gammaln(N + alpha) + sum_t gammaln(n_t)

    log p(words | z) = sum_t [ gammaln(W beta) - gammaln(m_t + W beta)
                               + sum_w gammaln(c_tw + beta) - gammaln(beta) ]

    Seating one more document changes this by exactly
    ``log_table_prior + log_word_likelihood`` of that document.
    '''
    alpha, beta, W = state.alpha, state.beta, state.W
    num_docs = np.array([t.num_docs for t in state.tables.values()], dtype=float)

    logp = len(num_docs) * np.log(alpha) + gammaln(alpha) - gammaln(state.total_docs + alpha)
    logp += gammaln(num_docs).sum()

    for table in state.tables.values():
        if table.num_words == 0:
            continue
        counts = np.array(list(table.word_counts.values()), dtype=float)
        logp += gammaln(W * beta) - gammaln(table.num_words + W * beta)
        logp += (gammaln(counts + beta) - gammaln(beta)).sum()
    return float(logp)
