from backend.engine.corpus.corpus import DEFAULT_WORDS_PATH, CorpusError, WordCorpus

__all__ = ["DEFAULT_WORDS_PATH", "CorpusError", "WordCorpus"]
