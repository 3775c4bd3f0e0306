"""Tokenize this script's own arguments.

    python examples/basic/parse_argv.py -vo out.txt --level=3 input -- -raw
"""

from argvlex import Lexer, TokenType

TAKES_VALUE = {"o", "level"}

lexer = Lexer.from_env()
for token in lexer.tokenize():
    if token.type is TokenType.VALUE:
        print(f"value   {token.value!r}")
    elif token.value in TAKES_VALUE:
        print(f"option  {token} = {lexer.get_value()!r}")
    else:
        print(f"flag    {token}")

if lexer.at_end_of_options():
    lexer.skip()
    print("literal", lexer.remaining())
