import unittest

from crpmm import State, Table


class Test_Table(unittest.TestCase):
    def test_add_and_remove(self):
        table = Table()
        table.add(['a', 'b', 'a'])
        table.add(['b'])
        self.assertEqual(table.num_docs, 2)
        self.assertEqual(table.num_words, 4)
        self.assertEqual(table.word_counts, {'a': 2, 'b': 2})

        table.remove(['a', 'b', 'a'])
        self.assertEqual(table.num_docs, 1)
        self.assertEqual(table.num_words, 1)
        self.assertEqual(table.word_counts, {'b': 1})

    def test_remove_unknown_words_leaves_counts(self):
        table = Table()
        table.add(['a', 'b'])
        with self.assertRaises(ValueError):
            table.remove(['a', 'a'])
        self.assertEqual(table.word_counts, {'a': 1, 'b': 1})
        self.assertEqual(table.num_docs, 1)
        self.assertEqual(table.num_words, 2)


class Test_State(unittest.TestCase):
    def setUp(self):
        self.state = State(alpha=1.0, beta=.5, W=3)

    def test_add_opens_tables_lazily(self):
        state = self.state
        state.add('d1', ['a', 'b'], 0)
        self.assertEqual(state.next_id, 1)
        state.add('d2', ['a'], 0)
        self.assertEqual(state.next_id, 1)
        state.add('d3', ['c'], 1)
        self.assertEqual(state.next_id, 2)
        self.assertEqual(state.K, 2)
        self.assertEqual(state.total_docs, 3)
        self.assertEqual(state.assignments, {'d1': 0, 'd2': 0, 'd3': 1})
        self.assertEqual(state.tables[0].word_counts, {'a': 2, 'b': 1})
        state.validate()

    def test_remove_garbage_collects(self):
        state = self.state
        state.add('d1', ['a', 'b'], 0)
        state.add('d2', ['c'], 1)
        self.assertEqual(state.remove('d1', ['a', 'b']), 0)
        self.assertNotIn(0, state.tables)
        self.assertNotIn('d1', state.assignments)
        self.assertEqual(state.total_docs, 1)
        self.assertEqual(state.next_id, 2)
        state.validate()

    def test_retired_ids_are_not_reused(self):
        state = self.state
        state.add('d1', ['a'], 0)
        state.remove('d1', ['a'])
        with self.assertRaises(ValueError):
            state.add('d1', ['a'], 0)
        state.add('d1', ['a'], state.next_id)
        self.assertEqual(state.assignments['d1'], 1)

    def test_skipping_ahead_advances_next_id(self):
        self.state.add('d1', ['a'], 5)
        self.assertEqual(self.state.next_id, 6)
        self.state.validate()

    def test_double_add(self):
        self.state.add('d1', ['a'], 0)
        with self.assertRaises(KeyError):
            self.state.add('d1', ['a'], 0)
        self.assertEqual(self.state.total_docs, 1)

    def test_remove_unseated(self):
        with self.assertRaises(KeyError):
            self.state.remove('d1', ['a'])

    def test_remove_with_wrong_words_is_atomic(self):
        state = self.state
        state.add('d1', ['a', 'b'], 0)
        with self.assertRaises(ValueError):
            state.remove('d1', ['c'])
        self.assertEqual(state.assignments, {'d1': 0})
        self.assertEqual(state.total_docs, 1)
        self.assertEqual(state.tables[0].word_counts, {'a': 1, 'b': 1})

    def test_degenerate_parameters(self):
        for alpha, beta in [(0, 1), (-1, 1), (1, 0), (1, -.5), (float('nan'), 1), (1, float('inf'))]:
            with self.assertRaises(ValueError):
                State(alpha=alpha, beta=beta)

    def test_setters_validate(self):
        with self.assertRaises(ValueError):
            self.state.alpha = 0
        self.state.beta = 2
        self.assertEqual(self.state.beta, 2.0)

    def test_validate_detects_bad_counts(self):
        state = self.state
        state.add('d1', ['a', 'b'], 0)
        state.tables[0].num_words = 5
        with self.assertRaises(ValueError):
            state.validate()

    def test_validate_detects_bad_total(self):
        state = self.state
        state.add('d1', ['a'], 0)
        state.total_docs = 2
        with self.assertRaises(ValueError):
            state.validate()


if __name__ == '__main__':
    unittest.main()
