import logging

from .dataclass import Corpus
from .state import State, Table
from .distributions import table_prior, log_table_prior, word_likelihood, log_word_likelihood, log_joint
from .sampling import sample, log_sample, WeightingScheme, LinearWeighting, LogWeighting, get_scheme
from .core import Gibbs, ChineseRestaurantProcess, initialize, reseat, table_weights, simulate_crp
from .models import CRPMM
from .utils import check_random_state, get_colors, plot_table_sizes

logging.getLogger(__name__).addHandler(logging.NullHandler())
