"""
frequency.py - Case-Insensitive Word Counting

Builds the frequency table (lower-case word -> count) for one document.
"""

from tagcloud.tokenizer import SEPARATORS, WORD, tokenize

# from https://www.ranks.nl/stopwords (default english list), reduced to
# entries without apostrophes since ' is a separator
STOP_WORDS = frozenset({
    "a","about","above","after","again","against","all","am","an","and","any",
    "are","aren","as","at","be","because","been","before","being","below",
    "between","both","but","by","cannot","could","couldn","did","didn","do",
    "does","doesn","doing","don","down","during","each","few","for","from",
    "further","had","hadn","has","hasn","have","haven","having","he","her",
    "here","hers","herself","him","himself","his","how","i","if","in","into",
    "is","isn","it","its","itself","let","ll","me","more","most","mustn","my",
    "myself","no","nor","not","of","off","on","once","only","or","other",
    "ought","our","ours","ourselves","out","over","own","re","s","same",
    "shan","she","should","shouldn","so","some","such","t","than","that",
    "the","their","theirs","them","themselves","then","there","these","they",
    "this","those","through","to","too","under","until","up","ve","very",
    "was","wasn","we","were","weren","what","when","where","which","while",
    "who","whom","why","with","won","would","wouldn","you","your","yours",
    "yourself","yourselves",
})


def compute_word_frequencies(text, separators=SEPARATORS):
    """
    Count every word run of text, folding case.

    Runtime Complexity: O(n) where n is the number of characters in text.
    Each token is produced once and dictionary updates are O(1).
    """
    frequencies = {}
    for token in tokenize(text, separators):
        if token.kind != WORD:
            continue
        word = token.text.lower()
        frequencies[word] = frequencies.get(word, 0) + 1
    return frequencies


def remove_stop_words(frequencies, stop_words=STOP_WORDS):
    """Return a copy of frequencies without the given stop words."""
    return {w: c for w, c in frequencies.items() if w not in stop_words}
