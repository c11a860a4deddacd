import unittest

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from crpmm import CRPMM, Corpus


def fit_crpmm(corpus, scheme):
    model = CRPMM(alpha=1, beta=.5, scheme=scheme, seed=0)
    model.fit(corpus, sweeps=5)
    return model


class Test_CRPMM(unittest.TestCase):
    def setUp(self):
        self.corpus, self.labels = CRPMM(alpha=1, beta=.5, seed=1).generate(n=30, W=20, doc_length=15)

    def test_generate(self):
        self.assertEqual(len(self.corpus), 30)
        self.assertEqual(set(self.corpus), set(self.labels))
        for doc_id, words in self.corpus.items():
            self.assertEqual(len(words), 15)
            self.assertTrue(all(w in ['w{}'.format(i) for i in range(20)] for w in words))
        tables = sorted(set(self.labels.values()))
        self.assertEqual(tables, list(range(len(tables))))

    def test_generate_lengths(self):
        lengths = [0, 3, 7]
        corpus, _ = CRPMM(seed=2).generate(n=3, W=5, doc_length=lengths)
        self.assertEqual([len(corpus['d{}'.format(i)]) for i in range(3)], lengths)

    def test_generate_bad_arguments(self):
        with self.assertRaises(ValueError):
            CRPMM().generate(n=3, W=0)
        with self.assertRaises(ValueError):
            CRPMM().generate(n=2, W=3, doc_length=[1, -1])

    def test_fit(self):
        for scheme in ['linear', 'log']:
            model = fit_crpmm(self.corpus, scheme)
            self.assertEqual(len(model.chain), 5)
            chain = model.chain.get_chain()
            self.assertEqual(chain['z'].shape, (5, 30))
            self.assertEqual(chain['K'].shape, (5,))
            self.assertTrue(np.all(np.isfinite(chain['log_joint'])))
            np.testing.assert_array_equal(chain['K'][-1], model.K)
            model.state.validate()

    def test_labels_follow_corpus_order(self):
        model = fit_crpmm(self.corpus, 'log')
        labels = model.labels
        for n, doc_id in enumerate(model.corpus):
            self.assertEqual(labels[n], model.state.assignments[doc_id])

    def test_fit_accepts_corpus(self):
        model = CRPMM(seed=3).fit(Corpus(self.corpus), sweeps=2)
        self.assertIsInstance(model.corpus, Corpus)
        self.assertEqual(model.state.total_docs, 30)

    def test_parameters(self):
        with self.assertRaises(ValueError):
            CRPMM(alpha=0)
        with self.assertRaises(ValueError):
            CRPMM(beta=-2)
        with self.assertRaises(ValueError):
            CRPMM(scheme='nope')
        self.assertEqual(CRPMM().K, 0)

    def test_plot(self):
        model = fit_crpmm(self.corpus, 'log')
        ax = model.plot()
        self.assertEqual(len(ax.patches), model.K)
        plt.close('all')


class Test_Corpus(unittest.TestCase):
    def test_vocab(self):
        corpus = Corpus({'d1': ['a', 'b'], 'd2': ('a', 'a')})
        self.assertEqual(corpus.W, 2)
        self.assertEqual(corpus.N, 2)
        self.assertEqual(corpus.num_words, 4)
        self.assertEqual(corpus.vocab['a'], 3)
        self.assertEqual(corpus['d2'], ('a', 'a'))
        self.assertIn('d1', corpus)

    def test_rejects_strings(self):
        with self.assertRaises(ValueError):
            Corpus({'d1': 'a b c'})

    def test_rejects_non_mapping(self):
        with self.assertRaises(TypeError):
            Corpus([['a', 'b']])

    def test_empty(self):
        corpus = Corpus()
        self.assertEqual(len(corpus), 0)
        self.assertEqual(corpus.W, 0)


if __name__ == '__main__':
    unittest.main()
