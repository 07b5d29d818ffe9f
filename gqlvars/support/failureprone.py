"""
Easing over the process of showing where things go wrong.

An editor mode only ever sees one line at a time, so there is no need to
find line breaks or convert offsets to row/column pairs: a column offset
into the current line is all the location data there is. The `illustration`
function turns that into a picture suitable for a log message.
"""

def illustration(single_line:str, start:int, width:int=0, *, prefix='', caption="near here") -> str:
	""" Builds up a picture of where something appears in a line of text. Useful for polite error messages. """
	blanks = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
	underline = '^'*max(1, min(width, len(single_line)-start))
	return prefix + single_line.rstrip() + '\n' + blanks + underline + " " + caption
