from .errors import ConfigError, FetchError, ReibunError
from .fetch import DocumentFetcher, sentences_url
from .furigana import AnnotatedText, PlainText, RubyPair, reconstruct
from .highlight import RenderedSentence, render, serialize, strip_citation
from .pipeline import EntrySentences, augment_document, collect_sentences
from .sentences import SentenceRecord, extract, parse_document

__all__ = [
    "AnnotatedText",
    "PlainText",
    "RubyPair",
    "reconstruct",
    "SentenceRecord",
    "extract",
    "parse_document",
    "RenderedSentence",
    "render",
    "serialize",
    "strip_citation",
    "DocumentFetcher",
    "sentences_url",
    "EntrySentences",
    "collect_sentences",
    "augment_document",
    "ReibunError",
    "FetchError",
    "ConfigError",
]
