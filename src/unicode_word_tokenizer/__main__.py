import sys

from unicode_word_tokenizer.cli import main


sys.exit(main())
