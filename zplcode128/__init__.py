from .tokenizer import Token, Digits, Chars, Controls, Tokenizer, InvalidByteError, tokenize
from .encoder import Subset, encode, encode_tokens
from .label import Label
