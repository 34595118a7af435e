"""
pyparsing grammars for notations and globs.

    path  := note ("." ident | bracket)*
    note  := ident | bracket
    glob  := "!"? path, where ident/bracket contents may also be "*"

Whitespace is never skipped, not even at either end, and tabs are kept.
"""
import pyparsing as pp

from . import elements as el

S = pp.Suppress
L = pp.Literal
ZM = pp.ZeroOrMore
dot = S('.')
lb = S('[')
rb = S(']')
bang = L('!')
end = pp.StringEnd()

ident = pp.Regex(r'[A-Za-z_$][A-Za-z0-9_$]*')
digits = pp.Word(pp.nums)
quoted = el.quoted_string(unquote=False)

# notes
identifier = ident.copy().set_parse_action(el.Identifier)
index = (lb + digits + rb).set_parse_action(el.Index)
quoted_key = (lb + quoted + rb).set_parse_action(el.QuotedKey)
wildcard = L('*').set_parse_action(el.Wildcard)
index_wildcard = (lb + S('*') + rb).set_parse_action(el.IndexWildcard)

bracket = index | quoted_key
glob_bracket = index_wildcard | bracket
glob_ident = wildcard | identifier

notation = ((identifier | bracket) + ZM((dot + identifier) | bracket) + end).leave_whitespace().parse_with_tabs()

glob = (
    pp.Opt(bang)('negated')
    + pp.Group((glob_ident | glob_bracket) + ZM((dot + glob_ident) | glob_bracket))('notes')
    + end
).leave_whitespace().parse_with_tabs()
