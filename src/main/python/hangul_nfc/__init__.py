# -*- coding: utf-8 -*-


"""
NFD Hangul to NFC Hangul recomposition
__author__ = 'Jamie (jamie.lim@kakaocorp.com)'
__copyright__ = 'Copyright (C) 2019-, Kakao Corp. All rights reserved.'
"""


from hangul_nfc.nfc import (IrreplaceableOldHangulError, Recomposer, has_decomposed_hangul,
                            has_obsolete_hangul, recompose)
from hangul_nfc.resource.jaso import compose
