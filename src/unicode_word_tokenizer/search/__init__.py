"""
Text analysis package.

- charsets: apostrophe-like and dash-like character tables
- segmentation: UAX #29 word segmentation with byte offsets
- unicode_tokenizer: the Unicode word tokenizer and its token stream
- analyzers: filters, pipelines and the named analyzer registry
"""
