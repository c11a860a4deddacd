import logging
from collections import Counter

from .sampling import get_scheme
from .utils import check_random_state, check_concentration

logger = logging.getLogger(__name__)


class Table(object):
    r'''
    Sufficient statistics of the documents seated at one table.

    num_docs : number of documents at this table
    num_words : number of words among all documents here
    word_counts : {word: count, ...}, only words with a positive count
    '''
    def __init__(self):
        self.num_docs = 0
        self.num_words = 0
        self.word_counts = {}

    def add(self, words):
        word_counts = self.word_counts
        for word in words:
            word_counts[word] = word_counts.get(word, 0) + 1
        self.num_words += len(words)
        self.num_docs += 1

    def remove(self, words):
        # Check first, so a bad document leaves the counts untouched.
        for word, count in Counter(words).items():
            if self.word_counts.get(word, 0) < count:
                raise ValueError("word '{}' occurs {} times in the document but {} times at the table".format(
                    word, count, self.word_counts.get(word, 0)))
        if self.num_docs < 1:
            raise ValueError("cannot remove a document from an empty table")

        word_counts = self.word_counts
        for word in words:
            word_counts[word] -= 1
            if word_counts[word] == 0:
                del word_counts[word]
        self.num_words -= len(words)
        self.num_docs -= 1

    def __repr__(self) -> str:
        return "{}(num_docs={}, num_words={}, word_counts={})".format(
            self.__class__.__name__, self.num_docs, self.num_words, self.word_counts)


class State(object):
    r'''
    Inference state of the CRP mixture: seating assignments plus per-table
    sufficient statistics.

    assignments : {doc_id: table_id, ...}
    tables : {table_id: Table, ...}
    total_docs : total number of documents among all tables
    next_id : an integer id that is available for a new table
    alpha : concentration parameter for table sizes
    beta : concentration parameter for table word distributions
    W : vocabulary size
    '''
    def __init__(self, alpha=1.0, beta=1.0, W=0, scheme='log', seed=None):
        self.assignments = {}
        self.tables = {}
        self.total_docs = 0
        self.next_id = 0
        self.alpha = alpha
        self.beta = beta
        self.W = int(W)
        self.vocab = Counter()
        self.scheme = get_scheme(scheme)
        self.random_state = check_random_state(seed)

    @property
    def alpha(self):
        return self._alpha
    @alpha.setter
    def alpha(self, value):
        self._alpha = check_concentration(value, 'alpha')

    @property
    def beta(self):
        return self._beta
    @beta.setter
    def beta(self, value):
        self._beta = check_concentration(value, 'beta')

    @property
    def K(self) -> int:
        return len(self.tables)

    def add(self, doc_id, words, table_id):
        """
        Seat document `doc_id` at `table_id`, creating the table if needed.
        """
        if doc_id in self.assignments:
            raise KeyError("document '{}' is already seated at table {}".format(doc_id, self.assignments[doc_id]))

        if table_id not in self.tables:
            if table_id < self.next_id:
                raise ValueError("table id {} has already been used, next available id is {}".format(table_id, self.next_id))
            self.tables[table_id] = Table()
            self.next_id = table_id + 1
            logger.debug("opened table %s", table_id)

        self.tables[table_id].add(words)
        self.total_docs += 1
        self.assignments[doc_id] = table_id

    def remove(self, doc_id, words):
        """
        Unseat document `doc_id`, closing its table if it was the last one there.
        Returns the id of the table it left.
        """
        if doc_id not in self.assignments:
            raise KeyError("document '{}' is not seated".format(doc_id))

        table_id = self.assignments[doc_id]
        table = self.tables[table_id]
        table.remove(words)
        del self.assignments[doc_id]
        self.total_docs -= 1

        if table.num_docs == 0:
            del self.tables[table_id]
            logger.debug("closed table %s", table_id)
        return table_id

    def validate(self):
        """
        Raise ValueError if any count is inconsistent.
        """
        if self.total_docs != len(self.assignments):
            raise ValueError("total_docs is {} but {} documents are assigned".format(self.total_docs, len(self.assignments)))

        seated = Counter(self.assignments.values())
        for table_id, table in self.tables.items():
            if table.num_docs <= 0:
                raise ValueError("table {} is empty".format(table_id))
            if table.num_docs != seated[table_id]:
                raise ValueError("table {} counts {} documents but {} are assigned to it".format(table_id, table.num_docs, seated[table_id]))
            if table.num_words != sum(table.word_counts.values()):
                raise ValueError("table {} counts {} words but its word counts sum to {}".format(
                    table_id, table.num_words, sum(table.word_counts.values())))
            if any(count <= 0 for count in table.word_counts.values()):
                raise ValueError("table {} keeps a non-positive word count".format(table_id))
            if table_id >= self.next_id:
                raise ValueError("table id {} is not below next_id {}".format(table_id, self.next_id))

        missing = set(seated) - set(self.tables)
        if missing:
            raise ValueError("documents are assigned to missing tables {}".format(sorted(missing)))

    def __repr__(self) -> str:
        output = self.__class__.__name__ + " \n"
        output += " documents =  " + str(self.total_docs) + " \n"
        output += " tables =  " + str(self.K) + " \n"
        output += " next_id =  " + str(self.next_id) + " \n"
        output += " alpha =  " + str(self.alpha) + " \n"
        output += " beta =  " + str(self.beta) + " \n"
        output += " W =  " + str(self.W) + " \n"
        return output
