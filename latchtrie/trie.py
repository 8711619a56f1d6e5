from __future__ import annotations

import logging
from typing import TypeVar, Generic, Tuple, Iterable, MutableMapping, Callable, Optional, Mapping, Union

from sortedcontainers import SortedDict

from latchtrie.rwlatch import ReaderWriterLatch, AutoReaderLatch, AutoWriterLatch

V = TypeVar('V')

_blank = object()
_no_default = object()

logger = logging.getLogger(__name__)


class TrieNode(Generic[V]):
    """
    A node for a trie, standing for a single character of its parent's key
    """
    __slots__ = '_key_char', 'children', 'is_end', 'inner_value'
    # different node types may have different orderings for their children
    children_factory: Callable[[], MutableMapping[str, TrieNode[V]]] = dict

    def __init__(self, key_char: str):
        self._key_char = key_char
        self.children: MutableMapping[str, TrieNode[V]] = self.children_factory()
        self.is_end = False
        self.inner_value: V = _blank

    @property
    def key_char(self) -> str:
        return self._key_char

    def has_child(self, key_char: str) -> bool:
        return key_char in self.children

    def has_children(self) -> bool:
        return bool(self.children)

    def is_end_node(self) -> bool:
        """
        :return: whether some key ends at this node
        """
        return self.is_end

    def set_end_node(self, is_end: bool):
        """
        set whether some key ends at this node, clearing the inner value of a node that no longer ends a key
        """
        self.is_end = is_end
        if not is_end:
            self.inner_value = _blank

    def value(self, default=_no_default):
        """
        :return: the inner value of the node, or default if none exists
        """
        if self.inner_value is _blank:
            if default is _no_default:
                raise ValueError('no value')
            return default
        return self.inner_value

    def set_value(self, value: V):
        self.inner_value = value
        self.is_end = True

    def insert_child(self, key_char: str, child: TrieNode[V]) -> Optional[TrieNode[V]]:
        """
        add a child node under key_char

        :return: the inserted child, or None if the child's own key char is not key_char, or if key_char is already
         taken
        """
        if child.key_char != key_char or key_char in self.children:
            return None
        self.children[key_char] = child
        return child

    def get_child(self, key_char: str) -> Optional[TrieNode[V]]:
        return self.children.get(key_char)

    def remove_child(self, key_char: str):
        """
        detach the child under key_char, along with its entire subtree. Does nothing if there is no such child.
        """
        self.children.pop(key_char, None)

    def __repr__(self):
        if self.is_end:
            return f'{type(self).__name__}({self.key_char!r}, value={self.inner_value!r})'
        return f'{type(self).__name__}({self.key_char!r})'


class Trie(Generic[V]):
    """
    A thread-safe trie, mapping non-empty strings to values.

    Lookups hold the trie's latch in shared mode, mutations hold it exclusively.
    """
    # different trie types may have different node types
    node_factory: Callable[[str], TrieNode[V]] = TrieNode
    latch_factory: Callable[[], ReaderWriterLatch] = ReaderWriterLatch
    root_char = '\0'

    def __init__(self, update_arg: Union[Mapping[str, V], Iterable[Tuple[str, V]], None] = None, **kwargs: V):
        self.root: TrieNode[V] = self.node_factory(self.root_char)
        self.latch = self.latch_factory()
        self._len = 0
        if isinstance(update_arg, Mapping):
            update_arg = update_arg.items()
        for k, v in update_arg or ():
            self.insert(k, v)
        for k, v in kwargs.items():
            self.insert(k, v)

    def get(self, key: str) -> Tuple[bool, Optional[V]]:
        """
        :return: a tuple of whether the key was found, and the value stored under it (or None)
        """
        if not key:
            return False, None
        with AutoReaderLatch(self.latch):
            current = self.root
            for k in key:
                current = current.get_child(k)
                if current is None:
                    return False, None
            if not current.is_end_node():
                return False, None
            return True, current.value()

    def insert(self, key: str, value: V) -> bool:
        """
        store a value under a key that is not already in the trie

        :return: whether the value was stored, False if the key is empty or already exists
        """
        if not key:
            return False
        with AutoWriterLatch(self.latch):
            current = self.root
            for k in key:
                child = current.get_child(k)
                if child is None:
                    child = current.insert_child(k, self.node_factory(k))
                current = child
            if current.is_end_node():
                return False
            current.set_value(value)
            self._len += 1
            return True

    def remove(self, key: str) -> bool:
        """
        remove a key from the trie, along with any node left without purpose

        :return: whether the key was removed, False if the key is empty or not in the trie
        """
        if not key:
            return False
        with AutoWriterLatch(self.latch):
            logger.debug('removing key %r', key)
            ret = self._remove(self.root, key, 0)
            if ret:
                self._len -= 1
            return ret

    def _remove(self, parent: TrieNode[V], key: str, idx: int) -> bool:
        """
        remove key[idx:] from under parent, pruning dead nodes on the way back up.

        The caller must hold the latch exclusively.
        """
        key_char = key[idx]
        node = parent.get_child(key_char)
        if node is None:
            return False

        if idx == len(key) - 1:
            if not node.is_end_node():
                return False
            if node.has_children():
                # still a prefix of other keys, downgrade to a structural node
                logger.debug('downgrading node %r of key %r', key_char, key)
                node.set_end_node(False)
            else:
                parent.remove_child(key_char)
            return True

        ret = self._remove(node, key, idx + 1)
        if not node.has_children() and not node.is_end_node():
            logger.debug('pruning node %r of key %r', key_char, key)
            parent.remove_child(key_char)
        return ret

    def __contains__(self, item):
        return self.get(item)[0]

    def __getitem__(self, item):
        found, ret = self.get(item)
        if not found:
            raise KeyError(item)
        return ret

    def __setitem__(self, key, value):
        if not self.insert(key, value):
            raise KeyError(key)

    def __delitem__(self, key):
        if not self.remove(key):
            raise KeyError(key)

    def __len__(self):
        with AutoReaderLatch(self.latch):
            return self._len

    def __bool__(self):
        return len(self) > 0

    def clear(self):
        with AutoWriterLatch(self.latch):
            self.root = self.node_factory(self.root_char)
            self._len = 0


class SortedTrieNode(TrieNode[V]):
    """
    A trie node that keeps its children ordered by key char
    """
    __slots__ = ()
    children_factory = SortedDict


class SortedTrie(Trie[V]):
    node_factory = SortedTrieNode
