"""Thai Segmenter - dictionary-based Thai word segmentation."""

__version__ = "0.1.0"

from .dictionary import DEFAULT_WORDS, Dictionary, load_dictionary
from .engines import NewmmSegmenter, SegmentationEngine, TccSegmenter, create_engine
from .tcc import segment_clusters, tcc_positions
from .tokenize import clear_dictionary_cache, get_dictionary, segment, word_tokenize
from .trie import Trie

__all__ = [
    "DEFAULT_WORDS",
    "Dictionary",
    "load_dictionary",
    "NewmmSegmenter",
    "SegmentationEngine",
    "TccSegmenter",
    "create_engine",
    "segment_clusters",
    "tcc_positions",
    "clear_dictionary_cache",
    "get_dictionary",
    "segment",
    "word_tokenize",
    "Trie",
]
