from .service.passphrase import assemble, generate_passphrase
from .service.wordlist import WordList, load_wordlist, read_wordlist

__all__ = ["assemble", "generate_passphrase", "WordList", "load_wordlist", "read_wordlist"]
