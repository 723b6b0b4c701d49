import unittest

from deals import chain_deal

import tripeaks


class TestFacade(unittest.TestCase):
    def test_given_facade_when_solving_deal_then_same_api_as_core(self):
        moves = tripeaks.solve_deal(chain_deal())
        self.assertIsNotNone(moves)
        board, stock = tripeaks.parse_deal(chain_deal())
        final_board, _ = tripeaks.replay(board, stock, moves)
        self.assertTrue(final_board.is_cleared())
        self.assertEqual(tripeaks.DECK_SIZE, 52)
        self.assertTrue(issubclass(tripeaks.DuplicateCardError, tripeaks.DealError))
        self.assertTrue(callable(tripeaks.main))


if __name__ == '__main__':
    unittest.main(verbosity=2)
