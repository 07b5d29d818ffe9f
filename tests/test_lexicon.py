import re
import unittest
from gqlvars.scanning.interface import PUNCTUATION, NUMBER, STRING, KEYWORD, END_OF_LINE, Token
from gqlvars.scanning.lexicon import Lexicon
from gqlvars.scanning.stream import StringStream, count_column
from gqlvars.support.interfaces import UndefinedSubexpression, LanguageError
from gqlvars import variables


def lex_all(lexicon, line):
	""" Returns the tokens found, and where lexing stopped. """
	stream = StringStream(line)
	tokens = []
	while True:
		stream.eat_space()
		token = lexicon.lex(stream)
		if token is None or token.kind == END_OF_LINE: return tokens, stream.right
		tokens.append(token)

def kinds_and_values(line):
	tokens, _ = lex_all(variables.lexemes, line)
	return [(token.kind, token.value) for token in tokens]


class TestStringStream(unittest.TestCase):
	def test_01_cursor_basics(self):
		s = StringStream('ab')
		self.assertTrue(s.sol())
		self.assertEqual('a', s.next())
		self.assertFalse(s.sol())
		self.assertEqual('b', s.next())
		self.assertTrue(s.eol())
		self.assertIsNone(s.next())
		self.assertEqual('ab', s.current())
		s.finish()
		self.assertEqual('', s.current())
	
	def test_02_match_is_anchored(self):
		s = StringStream('ab')
		self.assertIsNone(s.match(re.compile('b')))
		self.assertEqual(0, s.right)
		self.assertTrue(s.match('a'))
		self.assertEqual(1, s.right)
		self.assertIsNotNone(s.match(re.compile('b'), consume=False))
		self.assertEqual(1, s.right)
	
	def test_03_whitespace_and_indentation(self):
		s = StringStream('\t  x', tab_size=4)
		self.assertEqual(6, s.indentation())
		self.assertTrue(s.eat_space())
		self.assertEqual(3, s.right)
		self.assertFalse(s.eat_space())
		self.assertEqual(0, StringStream('x').indentation())
		self.assertEqual(5, count_column('ab\tc', 4, 4))


class TestLexicon(unittest.TestCase):
	def test_01_first_rule_wins(self):
		lx = Lexicon()
		lx.token('word', r'[a-z]+')
		lx.token('keyword', r'if')
		tokens, _ = lex_all(lx, 'if x')
		self.assertEqual([Token('word', 'if', 0, 2), Token('word', 'x', 3, 4)], tokens)
	
	def test_02_named_subexpressions(self):
		lx = Lexicon()
		lx.let('digit', '[0-9]')
		lx.let('pair', '{digit}{digit}')
		lx.token('pairs', '{pair}+')
		tokens, _ = lex_all(lx, '1234')
		self.assertEqual(['1234'], [t.value for t in tokens])
	
	def test_03_undefined_subexpression(self):
		lx = Lexicon()
		with self.assertRaises(UndefinedSubexpression) as cm:
			lx.token('oops', '{nowhere}+')
		self.assertEqual('nowhere', cm.exception.name)
		self.assertIsInstance(cm.exception, LanguageError)
	
	def test_04_quantifiers_are_not_references(self):
		lx = Lexicon()
		lx.token('hex', '[0-9a-f]{4}')
		tokens, _ = lex_all(lx, 'beef')
		self.assertEqual(['beef'], [t.value for t in tokens])
	
	def test_05_no_match_leaves_stream_alone(self):
		stream = StringStream('@x')
		self.assertIsNone(variables.lexemes.lex(stream))
		self.assertEqual(0, stream.right)
	
	def test_06_end_of_line(self):
		stream = StringStream('1')
		stream.right = 1
		self.assertEqual(Token(END_OF_LINE, '', 1, 1), variables.lexemes.lex(stream))
		self.assertEqual(1, stream.right)


class TestVariablesLexicon(unittest.TestCase):
	def test_01_mixed_line(self):
		self.assertEqual(
			[(PUNCTUATION, '['), (NUMBER, '-1'), (PUNCTUATION, ','), (STRING, '"{"'), (PUNCTUATION, ','), (KEYWORD, 'true'), (PUNCTUATION, ']')],
			kinds_and_values('[-1,"{",true]'),
		)
	
	def test_02_punctuation(self):
		self.assertEqual([(PUNCTUATION, c) for c in '[]{}:,'], kinds_and_values('[ ] { } : ,'))
	
	def test_03_numbers(self):
		for text in ['0', '-0', '42', '-17', '3.25', '1.', '6.02e23', '1E-9', '-2.5e+3']:
			with self.subTest(text=text):
				self.assertEqual([(NUMBER, text)], kinds_and_values(text))
	
	def test_04_leading_zero_splits(self):
		self.assertEqual([(NUMBER, '0'), (NUMBER, '12')], kinds_and_values('012'))
	
	def test_05_strings(self):
		for text in ['""', '"plain"', r'"say \"hi\""', r'"\/\\\b\f\n\r\t"', r'"\u00ff"', '"café"']:
			with self.subTest(text=text):
				self.assertEqual([(STRING, text)], kinds_and_values(text))
	
	def test_06_unterminated_string(self):
		self.assertEqual([(PUNCTUATION, ':'), (STRING, '"still typing')], kinds_and_values(':"still typing'))
	
	def test_07_keywords(self):
		self.assertEqual([(KEYWORD, 'true'), (KEYWORD, 'false'), (KEYWORD, 'null')], kinds_and_values('true false null'))
	
	def test_08_stops_at_garbage(self):
		tokens, stopped = lex_all(variables.lexemes, '1 - 2')
		self.assertEqual(['1'], [t.value for t in tokens])
		self.assertEqual(2, stopped)
	
	def test_09_offsets(self):
		tokens, _ = lex_all(variables.lexemes, '  {"a":1}')
		line = '  {"a":1}'
		for token in tokens:
			self.assertEqual(token.value, line[token.start:token.end])


if __name__ == '__main__':
	unittest.main()
