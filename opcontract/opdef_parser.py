"""
Parses the text form of an operator instance:

    Type(in0, in1, ...) -> (out0, ...)

Either slot list may be empty.  Slot names may contain '.', '/' and ':'
"""
from sly import Lexer, Parser
from .opdef import make_opdef
from .error import OpDefParseError

class OpDefLexer(Lexer):
    tokens = { ID, LPAREN, RPAREN, COMMA, ARROW }
    ignore = ' \t'
    ID      = r'[a-zA-Z_][a-zA-Z0-9_./:]*'
    LPAREN  = r'\('
    RPAREN  = r'\)'
    COMMA   = r','
    ARROW   = r'->'

    def error(self, t):
        raise OpDefParseError(
            f'Illegal character \'{t.value[0]}\' at position {t.index}')

class OpDefParser(Parser):
    tokens = OpDefLexer.tokens

    def __init__(self):
        self.lexer = OpDefLexer()

    @_('ID slots ARROW slots')
    def opdef(self, p):
        return make_opdef(p.ID, p.slots0, p.slots1)

    @_('LPAREN slot_list RPAREN')
    def slots(self, p):
        return p.slot_list

    @_('LPAREN RPAREN')
    def slots(self, p):
        return []

    @_('slot_list COMMA ID')
    def slot_list(self, p):
        p.slot_list.append(p.ID)
        return p.slot_list

    @_('ID')
    def slot_list(self, p):
        return [p.ID]

    def error(self, p):
        if p is None:
            raise OpDefParseError('Unexpected end of operator definition')
        raise OpDefParseError(
            f'Unexpected \'{p.value}\' at position {p.index}')

    def parse(self, text):
        opdef = super().parse(self.lexer.tokenize(text))
        if opdef is None:
            raise OpDefParseError(f'Empty operator definition: \'{text}\'')
        return opdef

def parse_opdef(text):
    return OpDefParser().parse(text)
