"""Character trigram (Jaccard) similarity."""


def generate_trigrams(text: str) -> set[str]:
    """Collect the 3-character substrings of a lowercased, padded string.

    Two spaces of padding on each side give word edges their own trigrams,
    so "ab" yields {"  a", " ab", "ab ", "b  "}.
    """
    padded = f"  {text.lower().strip()}  "
    return {padded[i : i + 3] for i in range(len(padded) - 2)}


def calculate_trigram_similarity(text1: str, text2: str) -> float:
    """Jaccard index of the trigram sets of two strings.

    Args:
        text1: First string
        text2: Second string

    Returns:
        Similarity in [0, 1]. Identical strings return exactly 1.0;
        an empty string against a non-empty one returns 0.0.
    """
    if text1 == text2:
        return 1.0
    if not text1 or not text2:
        return 0.0

    trigrams1 = generate_trigrams(text1)
    trigrams2 = generate_trigrams(text2)

    union = trigrams1 | trigrams2
    if not union:
        return 0.0
    return len(trigrams1 & trigrams2) / len(union)
