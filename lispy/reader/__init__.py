from lispy.reader.parser import SyntaxNode, TokenStream, is_blank, lex, open_depth, parse
from lispy.reader.read import read
