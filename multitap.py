#!/usr/bin/env python3
"""
Old Phone Pad Multi-Tap Decoder/Encoder

Decode key presses typed on an old phone keypad into text, or encode text
back into key presses.

Input symbols:
    0-9   keypad digits, repeated presses cycle through the key's characters
    ' '   pause, commits the pending key
    '*'   backspace, deletes the last committed character
    '#'   send, ends the input (required)

Examples:
    # Decode
    python3 multitap.py decode "4433555 555666#"
    # Output: HELLO

    # Backspace erases a whole press run
    python3 multitap.py decode "227*#"
    # Output: B

    # Encode
    python3 multitap.py encode "hello"
    # Output: 4433555 555666#
"""

import sys
import argparse
from pathlib import Path
from types import MappingProxyType
from typing import List, Optional, Sequence


SEND = '#'
BACKSPACE = '*'
PAUSE = ' '


# Keypad Mapping

KEYPAD = MappingProxyType({
    '1': "&'(",
    '2': 'abc',
    '3': 'def',
    '4': 'ghi',
    '5': 'jkl',
    '6': 'mno',
    '7': 'pqrs',
    '8': 'tuv',
    '9': 'wxyz',
    '0': ' ',
})

# Build reverse mapping: character -> (key, position)
LETTER_MAP = {}
for key, letters in KEYPAD.items():
    for pos, letter in enumerate(letters, 1):
        LETTER_MAP[letter] = (key, pos)


# Errors

class PhonePadError(ValueError):
    """Base class for rejected decoder input."""


class NullInputError(PhonePadError, TypeError):
    """Input sequence is missing (None)."""


class MissingSendError(PhonePadError):
    """Input sequence has no send character."""


# Decoding

def resolve(digit: str, presses: int) -> Optional[str]:
    """
    Resolve a press run to its character.

    Press counts wrap around, so pressing a 3-letter key 4 times gives the
    first letter again. Letters come back upper-cased.

    Returns:
        The character, or None if the key produces nothing
    """
    chars = KEYPAD.get(digit)
    if not chars:
        return None

    return chars[(presses - 1) % len(chars)].upper()


class TapAccumulator:
    """Pending key and how many times it has been pressed."""

    def __init__(self):
        self.digit: Optional[str] = None
        self.presses = 0

    def press(self, digit: str, output: List[str]) -> None:
        """Extend the current run, or commit it and start a new one."""
        if digit == self.digit:
            self.presses += 1
            return

        self.flush(output)
        self.digit = digit
        self.presses = 1

    def flush(self, output: List[str]) -> None:
        """Commit the pending run (if any) to output and reset."""
        if self.digit is not None:
            char = resolve(self.digit, self.presses)
            if char is not None:
                output.append(char)

        self.digit = None
        self.presses = 0


def decode(sequence: Optional[Sequence[str]]) -> str:
    """
    Decode a multi-tap key press sequence to text.

    Scanning stops at the first send character; anything after it is
    ignored. Symbols other than digits, pause, backspace and send are
    skipped.

    Raises:
        NullInputError: sequence is None
        MissingSendError: sequence has no send character
    """
    if sequence is None:
        raise NullInputError("Input cannot be None")

    if SEND not in sequence:
        raise MissingSendError(f"Input must contain the send character '{SEND}'")

    output: List[str] = []
    taps = TapAccumulator()

    for symbol in sequence:
        if symbol == SEND:
            break

        if symbol == BACKSPACE:
            taps.flush(output)
            if output:
                output.pop()
        elif symbol == PAUSE:
            taps.flush(output)
        elif symbol in KEYPAD:
            taps.press(symbol, output)

    taps.flush(output)
    return ''.join(output)


# Encoding

def encode_char(char: str) -> str:
    """Encode single character to its key press run."""
    lookup = char if char in LETTER_MAP else char.lower()
    if lookup not in LETTER_MAP:
        raise ValueError(f"Unsupported character: '{char}'")

    key, count = LETTER_MAP[lookup]
    return key * count


def encode(text: str) -> str:
    """
    Encode text to a multi-tap key press sequence ending in send.

    Runs on the same key are separated by a pause so they don't merge.
    """
    parts = []
    previous = None

    for char in text:
        run = encode_char(char)
        if run[0] == previous:
            parts.append(PAUSE)
        parts.append(run)
        previous = run[0]

    parts.append(SEND)
    return ''.join(parts)


# File I/O

def read_input(path: str) -> str:
    """Read input from file or stdin."""
    if path == '-':
        return sys.stdin.read().rstrip('\r\n')

    try:
        return Path(path).read_text(encoding='utf-8').rstrip('\r\n')
    except FileNotFoundError:
        print(f"Error: File not found: {path}", file=sys.stderr)
        sys.exit(1)
    except UnicodeDecodeError:
        print(f"Error: Invalid UTF-8 encoding: {path}", file=sys.stderr)
        sys.exit(1)


def write_output(content: str, path: Optional[str]) -> None:
    """Write output to file or stdout."""
    if path:
        try:
            Path(path).write_text(content + '\n', encoding='utf-8')
            print(f"Saved: {path}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing file: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        print(content)


def main():
    parser = argparse.ArgumentParser(
        description='Old phone pad multi-tap decoder/encoder',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    subparsers = parser.add_subparsers(dest='command', required=True,
                                       help='Operation mode')

    # Decode command
    decode_parser = subparsers.add_parser('decode',
                                          help='Decode key presses to text')
    decode_parser.add_argument('sequence', nargs='?',
                               help='Key presses ending in # (or use -i for file)')
    decode_parser.add_argument('-i', '--input',
                               help='Input file (use - for stdin)')
    decode_parser.add_argument('-o', '--output',
                               help='Output file (default: stdout)')

    # Encode command
    encode_parser = subparsers.add_parser('encode',
                                          help='Encode text to key presses')
    encode_parser.add_argument('text', nargs='?',
                               help='Text to encode (or use -i for file)')
    encode_parser.add_argument('-i', '--input',
                               help='Input file (use - for stdin)')
    encode_parser.add_argument('-o', '--output',
                               help='Output file (default: stdout)')

    args = parser.parse_args()

    try:
        if args.command == 'decode':
            if args.input:
                input_data = read_input(args.input)
            elif args.sequence is not None:
                input_data = args.sequence
            else:
                parser.error('Provide sequence or use -i for file input')

            result = decode(input_data)

        else:  # encode
            if args.input:
                input_data = read_input(args.input)
            elif args.text is not None:
                input_data = args.text
            else:
                parser.error('Provide text or use -i for file input')

            result = encode(input_data)

        write_output(result, args.output)

    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
