#!/usr/bin/env python3
# -*- coding: utf-8 -*-


"""
한글 자모 영역의 조합형(NFD) 텍스트를 완성형(NFC) 음절로 변환
__author__ = 'Jamie (jamie.lim@kakaocorp.com)'
__copyright__ = 'Copyright (C) 2019-, Kakao Corp. All rights reserved.'
"""


###########
# imports #
###########
from argparse import ArgumentParser, Namespace
import logging
import os
import sys
from typing import List, TextIO

from tqdm import tqdm

from hangul_nfc.nfc import IrreplaceableOldHangulError, has_decomposed_hangul, recompose


#############
# functions #
#############
def convert_lines(fin: TextIO, fout: TextIO, keep_old: bool = False) -> int:
    """
    recompose each line of input and write it to output
    Args:
        fin:  input file
        fout:  output file
        keep_old:  write lines with old Hangul as they are instead of stopping
    Returns:
        number of lines changed
    """
    changed = 0
    for line_num, line in enumerate(fin, start=1):
        line = line.rstrip('\r\n')
        try:
            recomposed = recompose(line)
        except IrreplaceableOldHangulError as old_err:
            if not keep_old:
                logging.error('%d-th line: %s', line_num, old_err)
                raise
            logging.warning('%d-th line is kept because of old hangul: %s', line_num, line)
            recomposed = line
        if recomposed != line:
            changed += 1
        print(recomposed, file=fout)
    logging.info('%d line(s) recomposed', changed)
    return changed


def _nfd_paths(root: str) -> List[str]:
    """
    list paths under root whose name has decomposed Hangul. children come before parents
    Args:
        root:  root directory
    Returns:
        list of paths
    """
    paths = []
    for dir_path, dir_names, file_names in os.walk(root, topdown=False):
        for name in file_names + dir_names:
            if has_decomposed_hangul(name):
                paths.append(os.path.join(dir_path, name))
    return paths


def rename_paths(root: str) -> int:
    """
    rename files and directories under root to their recomposed names
    Args:
        root:  root directory
    Returns:
        number of paths renamed
    """
    paths = _nfd_paths(root)
    renamed = 0
    for path in tqdm(paths, os.path.basename(root), len(paths), mininterval=1, ncols=100):
        dir_path, name = os.path.split(path)
        try:
            new_name = recompose(name)
        except IrreplaceableOldHangulError as old_err:
            logging.warning('skipped: %s', old_err)
            continue
        if new_name == name:
            logging.debug('unchanged: %s', path)
            continue
        new_path = os.path.join(dir_path, new_name)
        # normalization-insensitive file systems find the source itself under the new name
        if os.path.lexists(new_path) and not os.path.samestat(os.lstat(path), os.lstat(new_path)):
            logging.warning('target exists: %s -> %s', path, new_path)
            continue
        logging.debug('[%s] -> [%s]', path, new_path)
        os.rename(path, new_path)
        renamed += 1
    logging.info('%d of %d path(s) renamed under %s', renamed, len(paths), root)
    return renamed


def run(args: Namespace):
    """
    run function which is the start point of program
    Args:
        args:  program arguments
    """
    if args.rename:
        rename_paths(args.rename)
        return
    convert_lines(sys.stdin, sys.stdout, args.keep_old)


########
# main #
########
def main():
    """
    main function processes only argument parsing
    """
    parser = ArgumentParser(description='한글 자모 영역의 조합형(NFD) 텍스트를 완성형(NFC) 음절로 변환')
    parser.add_argument('--input', help='input file <default: stdin>', metavar='FILE')
    parser.add_argument('--output', help='output file <default: stdout>', metavar='FILE')
    parser.add_argument('--rename', help='rename files under the directory instead of converting '
                                         'text', metavar='DIR')
    parser.add_argument('--keep-old', help='keep lines with old hangul unchanged',
                        action='store_true')
    parser.add_argument('--debug', help='enable debug', action='store_true')
    args = parser.parse_args()

    if args.input:
        sys.stdin = open(args.input, 'r', encoding='UTF-8')
    if args.output:
        sys.stdout = open(args.output, 'w', encoding='UTF-8')
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    try:
        run(args)
    except IrreplaceableOldHangulError:
        sys.exit(1)


if __name__ == '__main__':
    main()
