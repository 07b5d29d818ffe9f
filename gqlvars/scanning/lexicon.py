"""
An ordered set of lexical rules, tried one after another at the scan position.

There is no longest-match contest here: the first rule to match wins, so the
order of definition is the order of precedence. Named sub-expressions make
the longer patterns easier to read (and write).
"""

import re

from ..support.interfaces import UndefinedSubexpression
from .interface import Token, END_OF_LINE
from .stream import StringStream

_REFERENCE = re.compile(r'{([A-Za-z_]\w*)}')

class Lexicon:
	def __init__(self):
		self.__subex = {}
		self.__rules = []
	
	def __expand(self, pattern:str) -> str:
		def replace(m):
			name = m.group(1)
			if name not in self.__subex: raise UndefinedSubexpression(name, pattern)
			return '(?:%s)' % self.__subex[name]
		return _REFERENCE.sub(replace, pattern)
	
	def let(self, name:str, pattern:str):
		""" Later patterns may say {name} to mean this one. """
		self.__subex[name] = self.__expand(pattern)
	
	def token(self, kind:str, pattern:str):
		""" Text matching the pattern is a token of the given kind. """
		self.__rules.append((kind, re.compile(self.__expand(pattern))))
	
	def lex(self, stream:StringStream):
		"""
		Consume and return the first rule's match at the scan position.
		At end of line, return an END_OF_LINE token without consuming anything.
		If no rule matches, return None and leave the stream alone.
		"""
		start = stream.right
		if stream.eol(): return Token(END_OF_LINE, '', start, start)
		for kind, pattern in self.__rules:
			m = stream.match(pattern)
			# A zero-width match would not make progress.
			if m is not None and m.end() > start:
				return Token(kind, m.group(), start, m.end())
			stream.right = start
		return None
