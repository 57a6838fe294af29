"""Linear scans over the digit sequence of a phone number."""

DIGIT_CHARS = frozenset("0123456789")


def extract_digits(number: str) -> str:
    """Keep only the decimal digits of ``number``."""
    return "".join(ch for ch in number if ch in DIGIT_CHARS)


def longest_repeat_run(digits: str) -> int:
    """Length of the longest run of one repeated digit."""
    longest = run = 0
    prev = None
    for ch in digits:
        run = run + 1 if ch == prev else 1
        prev = ch
        longest = max(longest, run)
    return longest


def has_repeat_run(digits: str, min_length: int) -> bool:
    return longest_repeat_run(digits) >= min_length


def longest_step_run(digits: str, step: int) -> int:
    """Length of the longest run where each digit is the previous one plus ``step``.

    There is no wraparound: ``9`` followed by ``0`` breaks an ascending run.
    """
    if not digits:
        return 0
    longest = run = 1
    for prev, cur in zip(digits, digits[1:]):
        run = run + 1 if int(cur) == int(prev) + step else 1
        longest = max(longest, run)
    return longest


def has_sequential_run(digits: str, min_length: int = 7) -> bool:
    """True when an ascending or descending run of ``min_length`` digits exists."""
    if len(digits) < min_length:
        return False
    return (
        longest_step_run(digits, 1) >= min_length
        or longest_step_run(digits, -1) >= min_length
    )


def has_repeated_pair(digits: str, min_repeats: int = 4) -> bool:
    """True when a 2-digit group occurs ``min_repeats`` times back to back."""
    for start in range(len(digits) - 1):
        pair = digits[start:start + 2]
        count = 1
        pos = start + 2
        while digits[pos:pos + 2] == pair:
            count += 1
            if count >= min_repeats:
                return True
            pos += 2
    return False
