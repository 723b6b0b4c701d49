import unittest

from tripeaks_core.cards import Card, Rank, Suit, full_deck
from tripeaks_core.errors import DealError, ParseError


class TestCards(unittest.TestCase):
    def test_given_token_when_parsing_then_rank_and_suit_read_case_insensitively(self):
        self.assertEqual(Card.parse('7h'), Card(Rank.SEVEN, Suit.HEARTS))
        self.assertEqual(Card.parse('tS'), Card(Rank.TEN, Suit.SPADES))
        self.assertEqual(Card.parse('aC'), Card.parse('AC'))
        self.assertEqual(Card.parse('KD').rank.value, 13)

    def test_given_any_card_token_when_parsed_and_rendered_then_canonical_uppercase(self):
        for card in full_deck():
            tok = card.token
            self.assertEqual(len(tok), 2)
            self.assertEqual(str(Card.parse(tok.lower())), tok.upper())
            self.assertEqual(str(Card.parse(tok)), tok)
        self.assertEqual(str(Card.parse('th')), 'TH')

    def test_given_malformed_tokens_when_parsing_then_parse_error(self):
        for bad in ['', 'A', '1H', '10H', 'AX', 'XH', 'AHH', ' A', None, 7, 'A\u017f', '\u0131S', 'Ａs']:
            with self.assertRaises(ParseError):
                Card.parse(bad)
        with self.assertRaises(DealError):
            Card.parse('ZZ')
        try:
            Card.parse('QQ')
        except ParseError as e:
            self.assertEqual(e.token, 'QQ')

    def test_given_king_and_ace_when_checking_sequence_then_adjacent_both_ways(self):
        king = Card.parse('KS')
        ace = Card.parse('AH')
        self.assertTrue(king.is_sequential(ace))
        self.assertTrue(ace.is_sequential(king))
        self.assertTrue(Rank.KING.is_sequential(Rank.QUEEN))
        self.assertTrue(Rank.ACE.is_sequential(Rank.TWO))

    def test_given_five_when_checking_sequence_then_only_four_and_six(self):
        neighbours = [r for r in Rank if Rank.FIVE.is_sequential(r)]
        self.assertEqual(neighbours, [Rank.FOUR, Rank.SIX])

    def test_given_all_rank_pairs_when_checking_sequence_then_symmetric_with_two_neighbours(self):
        for a in Rank:
            self.assertFalse(a.is_sequential(a))
            self.assertEqual(sum(1 for b in Rank if a.is_sequential(b)), 2)
            for b in Rank:
                self.assertEqual(a.is_sequential(b), b.is_sequential(a))
                diff = (a.value - b.value) % 13
                self.assertEqual(a.is_sequential(b), diff in (1, 12))

    def test_given_full_deck_when_built_then_52_distinct_cards(self):
        deck = full_deck()
        self.assertEqual(len(deck), 52)
        self.assertEqual(len(set(deck)), 52)
        self.assertEqual(str(deck[0]), 'AC')
        self.assertEqual(str(deck[-1]), 'KS')


if __name__ == '__main__':
    unittest.main(verbosity=2)
