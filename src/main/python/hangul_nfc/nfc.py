# -*- coding: utf-8 -*-


"""
recompose Hangul written in conjoining jamo (NFD) into precomposed syllables (NFC)
__author__ = 'Jamie (jamie.lim@kakaocorp.com)'
__copyright__ = 'Copyright (C) 2019-, Kakao Corp. All rights reserved.'
"""


###########
# imports #
###########
import logging
import re
from typing import Callable, List

from hangul_nfc.resource.jaso import LEAD, TRAIL, VOWEL, classify, compose


#############
# constants #
#############
NFD_HANGUL_PTN = re.compile(r'[\u1100-\u11ff]')    # whole Hangul Jamo block

# archaic jamo outside the modern 19 leads, 21 vowels and 27 trails
OLD_HANGUL_PTN = re.compile(r'[\u1113-\u115f'    # leads
                            r'\u1176-\u11a7'    # vowels
                            r'\u11c3-\u11ff]')    # trails


#########
# types #
#########
class IrreplaceableOldHangulError(Exception):
    """
    raised when text has old Hangul jamo which has no modern syllable to compose
    """
    def __init__(self, text: str):
        super().__init__('Irreplaceable old hangul character found: {}'.format(text))
        self.text = text


class SyllableSlots:
    """
    lead, vowel and trail jamo of a syllable being assembled
    """
    def __init__(self):
        self.lead = None
        self.vowel = None
        self.trail = None

    def clear(self):
        """
        empty all slots
        """
        self.lead = None
        self.vowel = None
        self.trail = None


class Recomposer:
    """
    NFD Hangul to NFC Hangul recomposer
    """
    def __init__(self, composer: Callable[[str, str, str], str] = compose):
        """
        Args:
            composer:  function composing (lead, vowel, trail) into a syllable
        """
        self._composer = composer

    def recompose(self, text: str) -> str:
        """
        recompose decomposed Hangul jamo in text into syllables
        Args:
            text:  input text
        Returns:
            recomposed text. the input itself if it has no decomposed Hangul
        """
        if has_obsolete_hangul(text):
            raise IrreplaceableOldHangulError(text)
        if not has_decomposed_hangul(text):
            return text

        outputs = []
        slots = SyllableSlots()
        for char in text:
            jamo = classify(char)
            if jamo is None:
                self._flush(slots, outputs)
                outputs.append(char)
                slots.clear()
            elif jamo.role == LEAD:
                self._flush(slots, outputs)
                slots.clear()
                slots.lead = jamo
            elif jamo.role == VOWEL:
                if slots.vowel:
                    self._flush(slots, outputs)
                    slots.clear()
                slots.vowel = jamo
            else:
                assert jamo.role == TRAIL
                slots.trail = jamo
                self._flush_trail(slots, outputs)
                slots.clear()
        self._flush_end(slots, outputs)
        logging.debug('%d jamo/syllable(s) from %d character(s)', len(outputs), len(text))
        return ''.join(outputs)

    def _flush(self, slots: SyllableSlots, outputs: List[str]):
        """
        emit the syllable in progress when a lead, a vowel or an ordinary character interrupts
        Args:
            slots:  syllable slots
            outputs:  output list
        """
        if slots.lead and slots.vowel:
            outputs.append(self._composer(slots.lead.char, slots.vowel.char, ''))
        elif slots.lead:
            outputs.append(slots.lead.char)
        elif slots.vowel:
            outputs.append(slots.vowel.char)

    def _flush_trail(self, slots: SyllableSlots, outputs: List[str]):
        """
        emit the syllable closed by a trail. a trail without vowel is never attached
        Args:
            slots:  syllable slots
            outputs:  output list
        """
        if slots.lead and slots.vowel:
            outputs.append(self._composer(slots.lead.char, slots.vowel.char, slots.trail.char))
            return
        if slots.lead:
            outputs.append(slots.lead.char)
        elif slots.vowel:
            # pending vowel is kept rather than dropped with the trail
            outputs.append(slots.vowel.char)
        outputs.append(slots.trail.char)

    def _flush_end(self, slots: SyllableSlots, outputs: List[str]):
        """
        emit what is left in slots at the end of text
        Args:
            slots:  syllable slots
            outputs:  output list
        """
        if slots.lead and slots.vowel:
            trail = slots.trail.char if slots.trail else ''
            outputs.append(self._composer(slots.lead.char, slots.vowel.char, trail))
            return
        for jamo in [slots.lead, slots.vowel, slots.trail]:
            if jamo:
                outputs.append(jamo.char)


#############
# variables #
#############
_RECOMPOSER = Recomposer()


#############
# functions #
#############
def has_decomposed_hangul(text: str) -> bool:
    """
    whether text has any character of Hangul Jamo block (U+1100~U+11FF)
    """
    return NFD_HANGUL_PTN.search(text) is not None


def has_obsolete_hangul(text: str) -> bool:
    """
    whether text has any old Hangul jamo not used in modern Korean
    """
    return OLD_HANGUL_PTN.search(text) is not None


def recompose(text: str) -> str:
    """
    recompose text with the default syllable composer
    Args:
        text:  input text
    Returns:
        recomposed text
    """
    return _RECOMPOSER.recompose(text)
