from collections import Counter
from collections.abc import Mapping, Sequence


def check_document(doc_id, words):
    if isinstance(words, (str, bytes)) or not isinstance(words, Sequence):
        raise ValueError("document '{}' must be a sequence of word tokens, got {}".format(doc_id, type(words).__name__))
    return tuple(words)


class Corpus(Mapping):
    r'''
    Read-only collection of tokenized documents.

    >>> corpus = Corpus({"d1": ["a", "b"], "d2": ["a", "a"]})
    >>> corpus.W
    2
    '''
    def __init__(self, docs: Mapping = None) -> None:
        self.load(docs)

    def load(self, docs: Mapping = None) -> None:
        if docs is None:
            docs = {}
        if not isinstance(docs, Mapping):
            raise TypeError("corpus must be a mapping of document id to words, got {}".format(type(docs).__name__))

        self._docs = {}
        self._vocab = Counter()
        for doc_id, words in docs.items():
            words = check_document(doc_id, words)
            self._docs[doc_id] = words
            self._vocab.update(words)

    @property
    def vocab(self) -> Counter:
        return self._vocab

    @property
    def W(self) -> int:
        return len(self._vocab)

    @property
    def N(self) -> int:
        return len(self._docs)

    @property
    def num_words(self) -> int:
        return sum(self._vocab.values())

    def __getitem__(self, doc_id):
        return self._docs[doc_id]

    def __iter__(self):
        return iter(self._docs)

    def __len__(self) -> int:
        return len(self._docs)

    def __repr__(self) -> str:
        output = self.__class__.__name__ + " \n"
        output += "documents =  " + str(self.N) + " \n"
        output += "words =  " + str(self.num_words) + " \n"
        output += "vocabulary =  " + str(self.W) + " \n"
        return output
