import argparse
import logging
import sys
from collections import Counter

from sequence_reader import ErrorKind, InputReadError, parse_int, read_input

logger = logging.getLogger()


def pairingSocks(socks):
    n = Counter(socks)
    return sum(i // 2 for i in n.values())


def setup_logging(log_file=None, verbose=False):
    # stdout carries the result, so the console handler goes to stderr
    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter('%(asctime)s %(levelname)s %(message)s', '%m-%d-%Y %H:%M:%S')
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)


def load_socks(input_file=None):
    if input_file:
        logger.debug(f"Reading socks from {input_file}")
        try:
            input_content = open(input_file, 'rb')
        except OSError as err:
            raise InputReadError(ErrorKind.IO, err) from err
        with input_content:
            return read_input(input_content, parse_int)
    return read_input(sys.stdin.buffer, parse_int)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Count matching pairs of socks")
    parser.add_argument('--input_file', help="file holding the sock colors, stdin when omitted")
    parser.add_argument('--log_file', help="file to write debug logs to")
    parser.add_argument('--verbose', action='store_true', help="print debug logs to stderr")
    args = parser.parse_args(argv)
    setup_logging(args.log_file, args.verbose)

    try:
        socks = load_socks(args.input_file)
    except InputReadError as ex:
        logger.error(f"Reading input failed: {ex!r}")
        sys.exit(1)

    result = pairingSocks(socks)
    logger.debug(f"Found {result} pairs in {len(socks)} socks")
    sys.stdout.write(str(result))
    sys.stdout.flush()


if __name__ == '__main__':
    main()
