"""
GraphQL variables are written as a JSON object. This module defines that
language for the online parser: a lexicon, a grammar table, and one hook
that records the name of each key as it goes by, so the parser state says
something useful about where the cursor is.

Nothing here runs by itself. See `gqlvars.mode` for how it gets wired up.
"""

import re

from .scanning import interface as lex
from .scanning.lexicon import Lexicon
from .parsing import interface as style
from .parsing.rules import Terminal, p, t, opt, list_of

###################################################################################
#  The lexical rules. These are tried in order; the first to match wins.
###################################################################################

lexemes = Lexicon()

# All punctuation used in JSON.
lexemes.token(lex.PUNCTUATION, r'[\[\]{}:,]')

lexemes.let('signedInteger', r'-?(0|[1-9][0-9]*)')
lexemes.let('fractionalPart', r'\.[0-9]*')
lexemes.let('exponent', r'[eE][+-]?[0-9]+')
lexemes.token(lex.NUMBER, '{signedInteger}{fractionalPart}?{exponent}?')

# The closing quote is optional, so a string still being typed at the end of a line is still a string.
lexemes.let('escape', r'\\(["/\\bfnrt]|u[0-9a-fA-F]{4})')
lexemes.token(lex.STRING, r'"([^"\\]|{escape})*"?')

lexemes.token(lex.KEYWORD, 'true|false|null')

###################################################################################
#  The grammar.
###################################################################################

_TERMINATED = re.compile(r'"([^"\\]|\\.)*"')

def unquote(text:str) -> str:
	""" Drop the quotes from a string token. An unterminated string only has the one. """
	return text[1:-1] if _TERMINATED.fullmatch(text) else text[1:]

def named_key(key_style:str) -> Terminal:
	""" A string token that also decorates the state with its (unquoted) text as `name`. """
	def update(state, token): state.name = unquote(token.value)
	return Terminal(key_style, lambda token: token.kind == lex.STRING, update)

def value(token):
	if token.kind == lex.NUMBER: return 'NumberValue'
	if token.kind == lex.STRING: return 'StringValue'
	if token.is_punctuation('['): return 'ListValue'
	if token.is_punctuation('{'): return 'ObjectValue'
	if token.kind == lex.KEYWORD:
		return {'true': 'BooleanValue', 'false': 'BooleanValue', 'null': 'NullValue'}.get(token.value)
	return None

GRAMMAR = {
	'Document': [p('{'), list_of('Variable', opt(p(','))), p('}')],
	'Variable': [named_key(style.VARIABLE), p(':'), 'Value'],
	'Value': value,
	'NumberValue': [t(lex.NUMBER, style.NUMBER)],
	'StringValue': [t(lex.STRING, style.STRING)],
	'BooleanValue': [t(lex.KEYWORD, style.BUILTIN)],
	'NullValue': [t(lex.KEYWORD, style.KEYWORD)],
	'ListValue': [p('['), list_of('Value', opt(p(','))), p(']')],
	'ObjectValue': [p('{'), list_of('ObjectField', opt(p(','))), p('}')],
	'ObjectField': [named_key(style.ATTRIBUTE), p(':'), 'Value'],
}
