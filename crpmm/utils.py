import numbers
import numpy as np
import matplotlib.pyplot as plt


def check_random_state(seed=None):
    """
    Turn `seed` into a random source with a ``random()`` method.

    Parameters
    ----------
        seed : None, int, numpy.random.Generator or numpy.random.RandomState.
            None gives a fresh, OS-seeded generator. An int seeds a new
            generator. Generators and RandomState instances are passed through.
    Returns
    -------
        A numpy random source.
    """
    if seed is None:
        return np.random.default_rng()
    if isinstance(seed, (np.random.Generator, np.random.RandomState)):
        return seed
    if isinstance(seed, numbers.Integral):
        return np.random.default_rng(int(seed))
    raise TypeError("{} cannot be used to seed a random source".format(seed))


def check_concentration(value, name):
    value = float(value)
    if not np.isfinite(value) or value <= 0:
        raise ValueError("{} must be a positive finite number, got {}".format(name, value))
    return value


def get_colors():
    k = np.arange(8)
    cl = ['Dark2', 'Set1', 'Set2']*2
    colors = np.concatenate([plt.get_cmap(s)(k) for s in cl],0)
    return colors


def plot_table_sizes(state, ax=None, figsize=(5,3), colors=None):
    """
    Bar chart of the number of documents seated at each table, largest first.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=figsize)
    if colors is None:
        colors = get_colors()

    table_ids = sorted(state.tables, key=lambda t: state.tables[t].num_docs, reverse=True)
    sizes = np.array([state.tables[t].num_docs for t in table_ids])
    x = np.arange(len(table_ids))
    ax.bar(x, sizes, color=colors[x % len(colors)])
    ax.set_xticks(x)
    ax.set_xticklabels([str(t) for t in table_ids])
    ax.set_xlabel('table')
    ax.set_ylabel('documents')
    plt.tight_layout()
    return ax
