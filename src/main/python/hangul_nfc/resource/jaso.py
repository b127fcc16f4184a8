# -*- coding: utf-8 -*-


"""
한글 자소 관련 상수 및 음절 조합 모듈
__author__ = 'Jamie (jamie.lim@kakaocorp.com)'
__copyright__ = 'Copyright (C) 2019-, Kakao Corp. All rights reserved.'
"""


###########
# imports #
###########
from collections import namedtuple
from typing import Optional


#############
# constants #
#############
# 자소의 역할
LEAD = 'lead'    # 초성
VOWEL = 'vowel'    # 중성
TRAIL = 'trail'    # 종성

# 초성으로 올 수 있는 한글 호환 자모
CHOSEONGS = ['ㄱ', 'ㄲ', 'ㄴ', 'ㄷ', 'ㄸ', 'ㄹ', 'ㅁ', 'ㅂ', 'ㅃ', 'ㅅ',
             'ㅆ', 'ㅇ', 'ㅈ', 'ㅉ', 'ㅊ', 'ㅋ', 'ㅌ', 'ㅍ', 'ㅎ']

# 중성 -> 분해된 중성 (이중 모음은 두 글자로 분해)
DISASSEMBLED_VOWELS_BY_VOWEL = {
    'ㅏ': 'ㅏ', 'ㅐ': 'ㅐ', 'ㅑ': 'ㅑ', 'ㅒ': 'ㅒ', 'ㅓ': 'ㅓ',
    'ㅔ': 'ㅔ', 'ㅕ': 'ㅕ', 'ㅖ': 'ㅖ', 'ㅗ': 'ㅗ', 'ㅘ': 'ㅗㅏ',
    'ㅙ': 'ㅗㅐ', 'ㅚ': 'ㅗㅣ', 'ㅛ': 'ㅛ', 'ㅜ': 'ㅜ', 'ㅝ': 'ㅜㅓ',
    'ㅞ': 'ㅜㅔ', 'ㅟ': 'ㅜㅣ', 'ㅠ': 'ㅠ', 'ㅡ': 'ㅡ', 'ㅢ': 'ㅡㅣ',
    'ㅣ': 'ㅣ',
}
JUNGSEONGS = list(DISASSEMBLED_VOWELS_BY_VOWEL.keys())

# 종성으로 올 수 있는 한글 호환 자모 (겹받침 포함)
JONGSEONGS = ['ㄱ', 'ㄲ', 'ㄳ', 'ㄴ', 'ㄵ', 'ㄶ', 'ㄷ', 'ㄹ', 'ㄺ', 'ㄻ',
              'ㄼ', 'ㄽ', 'ㄾ', 'ㄿ', 'ㅀ', 'ㅁ', 'ㅂ', 'ㅄ', 'ㅅ', 'ㅆ',
              'ㅇ', 'ㅈ', 'ㅊ', 'ㅋ', 'ㅌ', 'ㅍ', 'ㅎ']

# 한글 자모 영역(U+1100~U+11FF) 내 현대 한글 자소의 시작 코드
FIRST_JAMO_BEGIN = 0x1100
MIDDLE_JAMO_BEGIN = 0x1161
LAST_JAMO_BEGIN = 0x11A8

# 한글 음절 영역
SYLLABLE_BEGIN = 0xAC00
SYLLABLE_END = 0xD7A3


#########
# types #
#########
Jamo = namedtuple('Jamo', ['role', 'char'])    # 역할과 표시용 (호환) 자모


#############
# variables #
#############
# 자모 영역 코드 -> 자소
_JAMO_TABLE = {FIRST_JAMO_BEGIN + idx: Jamo(LEAD, char) for idx, char in enumerate(CHOSEONGS)}
_JAMO_TABLE.update({MIDDLE_JAMO_BEGIN + idx: Jamo(VOWEL, DISASSEMBLED_VOWELS_BY_VOWEL[vowel])
                    for idx, vowel in enumerate(JUNGSEONGS)})
_JAMO_TABLE.update({LAST_JAMO_BEGIN + idx: Jamo(TRAIL, char)
                    for idx, char in enumerate(JONGSEONGS)})

# 조합 시 사용하는 자소 -> 인덱스
_FIRST_INDEX = {char: idx for idx, char in enumerate(CHOSEONGS)}
_MIDDLE_INDEX = {disassembled: idx for idx, disassembled
                 in enumerate(DISASSEMBLED_VOWELS_BY_VOWEL.values())}
_MIDDLE_INDEX.update({vowel: idx for idx, vowel in enumerate(JUNGSEONGS)})
_LAST_INDEX = {char: idx for idx, char in enumerate(JONGSEONGS, start=1)}
_LAST_INDEX[''] = 0


#############
# functions #
#############
def classify(char: str) -> Optional[Jamo]:
    """
    자모 영역의 문자 하나가 어떤 역할의 자소인지 판별한다.
    Args:
        char:  문자
    Returns:
        자소. 현대 한글 자소가 아닐 경우 None
    """
    return _JAMO_TABLE.get(ord(char))


def compose(lead: str, vowel: str, trail: str = '') -> str:
    """
    초성, 중성, 종성을 조합하여 한글 음절 하나를 만든다.
    Args:
        lead:  초성 (호환 자모)
        vowel:  중성. 이중 모음은 분해된 두 글자('ㅗㅏ') 혹은 한 글자('ㅘ') 모두 가능
        trail:  종성. 없을 경우 빈 문자열
    Returns:
        조합된 음절
    """
    try:
        first_idx = _FIRST_INDEX[lead]
        middle_idx = _MIDDLE_INDEX[vowel]
        last_idx = _LAST_INDEX[trail]
    except KeyError as key_err:
        raise ValueError('invalid jaso to compose: ({}, {}, {})'.format(lead, vowel, trail)) \
                from key_err
    return chr(SYLLABLE_BEGIN + (first_idx * len(JUNGSEONGS) + middle_idx) * 28 + last_idx)
