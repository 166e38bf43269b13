"""Services package - Lexicon, cropping, extraction and batch runs."""
