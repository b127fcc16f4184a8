#!/usr/bin/env python3
# -*- coding: utf-8 -*-


"""
jaso module tests
__author__ = 'Jamie (jamie.lim@kakaocorp.com)'
__copyright__ = 'Copyright (C) 2019-, Kakao Corp. All rights reserved.'
"""


###########
# imports #
###########
import unittest
from unicodedata import normalize as norm

from hangul_nfc.resource.jaso import (CHOSEONGS, DISASSEMBLED_VOWELS_BY_VOWEL, JONGSEONGS,
                                      JUNGSEONGS, LEAD, TRAIL, VOWEL, Jamo, classify, compose)


#########
# tests #
#########
class TestJaso(unittest.TestCase):
    """
    jaso tests
    """
    def test_inventory(self):
        """
        test sizes of modern jamo inventories
        """
        self.assertEqual(len(CHOSEONGS), 19)
        self.assertEqual(len(JUNGSEONGS), 21)
        self.assertEqual(len(JONGSEONGS), 27)
        classified = [chr(code) for code in range(0x1100, 0x1200) if classify(chr(code))]
        self.assertEqual(len(classified), 19 + 21 + 27)

    def test_classify(self):
        """
        test classify()
        """
        self.assertEqual(classify('ᄀ'), Jamo(LEAD, 'ㄱ'))
        self.assertEqual(classify('ᄒ'), Jamo(LEAD, 'ㅎ'))
        self.assertEqual(classify('ᅡ'), Jamo(VOWEL, 'ㅏ'))
        self.assertEqual(classify('ᅪ'), Jamo(VOWEL, 'ㅗㅏ'))
        self.assertEqual(classify('ᅴ'), Jamo(VOWEL, 'ㅡㅣ'))
        self.assertEqual(classify('ᆨ'), Jamo(TRAIL, 'ㄱ'))
        self.assertEqual(classify('ᆫ'), Jamo(TRAIL, 'ㄴ'))
        self.assertEqual(classify('ᇂ'), Jamo(TRAIL, 'ㅎ'))
        self.assertIsNone(classify('a'))
        self.assertIsNone(classify('ㄱ'))
        self.assertIsNone(classify('가'))
        self.assertIsNone(classify('ᄓ'))
        self.assertIsNone(classify('ᅠ'))
        self.assertIsNone(classify('ᇃ'))

    def test_compose(self):
        """
        test compose()
        """
        self.assertEqual(compose('ㅎ', 'ㅏ', 'ㄴ'), '한')
        self.assertEqual(compose('ㄱ', 'ㅏ'), '가')
        self.assertEqual(compose('ㄱ', 'ㅗㅏ', ''), '과')
        self.assertEqual(compose('ㄱ', 'ㅘ', ''), '과')
        self.assertEqual(compose('ㅎ', 'ㅡㅣ', 'ㄺ'), '흵')
        with self.assertRaises(ValueError):
            compose('ㅏ', 'ㅏ')
        with self.assertRaises(ValueError):
            compose('ㄱ', 'ㄱ')
        with self.assertRaises(ValueError):
            compose('ㄱ', 'ㅏ', 'ㄸ')

    def test_compose_all(self):
        """
        test compose() with every modern lead, vowel and trail combination
        """
        for first_idx, lead in enumerate(CHOSEONGS):
            for middle_idx, vowel in enumerate(JUNGSEONGS):
                disassembled = DISASSEMBLED_VOWELS_BY_VOWEL[vowel]
                for last_idx in range(len(JONGSEONGS) + 1):
                    trail = JONGSEONGS[last_idx - 1] if last_idx else ''
                    nfd = chr(0x1100 + first_idx) + chr(0x1161 + middle_idx)
                    if last_idx:
                        nfd += chr(0x11a7 + last_idx)
                    self.assertEqual(compose(lead, disassembled, trail), norm('NFC', nfd))


########
# main #
########
if __name__ == '__main__':
    unittest.main()
