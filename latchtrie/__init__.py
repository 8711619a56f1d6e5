from latchtrie.trie import Trie, TrieNode, SortedTrie, SortedTrieNode
from latchtrie.rwlatch import ReaderWriterLatch, AutoReaderLatch, AutoWriterLatch
from latchtrie.exceptions import LatchError
from latchtrie._version import __version__

__all__ = ['Trie', 'TrieNode', 'SortedTrie', 'SortedTrieNode', 'ReaderWriterLatch', 'AutoReaderLatch',
           'AutoWriterLatch', 'LatchError', '__version__']
