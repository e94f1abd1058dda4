from typing import List


def read_targets(filename: str) -> List[str]:
    """
    One URL per line:

        https://example.com/api
        http://test.example.org

    Surrounding whitespace is trimmed and blank lines are dropped.
    """
    with open(filename, 'r', encoding='utf-8', errors='ignore') as f:
        raw = f.read().replace("\r\n", "\n")

    return [line.strip() for line in raw.strip().split("\n") if line.strip()]
