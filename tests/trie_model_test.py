from typing import Dict
from unittest import TestCase

from latchtrie.trie import Trie, TrieNode, SortedTrie

import numpy as np


class TrieTest(TestCase):
    trie_factory = Trie

    def assertNodeOk(self, node: TrieNode):
        any_value = node.is_end_node()
        self.assertEqual(node.is_end_node(), node.value(None) is not None)
        for k, child in node.children.items():
            self.assertEqual(k, child.key_char)
            any_value |= self.assertNodeOk(child)
        # a node with no value anywhere beneath it is dead and should have been pruned
        self.assertTrue(any_value)
        return True

    def assertTrieOk(self, trie: Trie):
        self.assertFalse(trie.root.is_end_node())
        if len(trie) == 0:
            self.assertFalse(trie.root.children)
        else:
            for child in trie.root.children.values():
                self.assertNodeOk(child)

    def assertTrieEqual(self, trie: Trie, control: Dict, keys):
        self.assertTrieOk(trie)
        self.assertEqual(len(trie), len(control))
        for key in keys:
            if key in control:
                self.assertEqual(trie.get(key), (True, control[key]))
            else:
                self.assertEqual(trie.get(key), (False, None))

    def test_run(self):
        ops = 1_000
        all_keys = ['', 'a', 'in', 'inn', 'i', 'te', 'to', 'ted', 'tea', 'ten cents']

        rem_odds = 0.4
        rng = np.random.default_rng(0)
        rolls = rng.random(ops) > rem_odds
        keys = rng.choice(all_keys, size=ops)

        trie = self.trie_factory()
        ctrl = {}

        for i, (ins, key) in enumerate(zip(rolls, keys)):
            key = str(key)
            if ins:
                expected = bool(key) and key not in ctrl
                self.assertEqual(trie.insert(key, i), expected)
                if expected:
                    ctrl[key] = i
            else:
                expected = key in ctrl
                self.assertEqual(trie.remove(key), expected)
                ctrl.pop(key, None)
            self.assertTrieEqual(trie, ctrl, all_keys)


class SortedTrieTest(TrieTest):
    trie_factory = SortedTrie
