"""
This module contains all stemming rules.
"""

import enum
import logging
from typing import Callable, Optional
from collections import namedtuple

logger = logging.getLogger(__name__)

Condition = Callable[[str], bool]
Step = Callable[[str], str]
SimplifiedContext = tuple[str, list[tuple[str, str, str]]]

Removal = namedtuple("Removal", "subject result step")
SuffixRule = namedtuple("SuffixRule", "suffix replacement condition", defaults=(None,))

VOWELS = frozenset("aeiou")


class Match(enum.Enum):
    """
    Outcome of trying a rule group against a word.

    A structural match closes the group whether or not the rule's condition
    holds, so BLOCKED and REWRITTEN both stop later rules from being tried.
    """

    NONE = 0
    BLOCKED = 1
    REWRITTEN = 2


class Context:
    """
    Stemming Context using the Porter algorithm.

    Positions and lengths are counted in code points of the str.
    """

    def __init__(self, original_word: str):

        self.original_word = original_word
        self.current_word = original_word
        self.result = ""
        self.removals: list[Removal] = []

        self._start_stemming_process()
        self.result = self.current_word

    def add_removal(self, removal: Removal) -> None:
        """
        Add Removal information to removals.
        """
        self.removals.append(removal)

    def _start_stemming_process(self) -> None:

        # words of length 1 or 2 keep their original casing
        if len(self.original_word) in (1, 2):
            return

        self.current_word = self.original_word.strip().lower()
        if not self.current_word:
            return

        self.accept_visitors(VISITORS)

    def accept_visitors(self, visitors: list[tuple[str, Step]]) -> None:
        """
        Accept visitors rules, in order.
        """
        for name, visitor in visitors:
            self.accept(name, visitor)

    def accept(self, name: str, visitor: Step) -> None:
        """
        Accept visitor rule.

        Record a Removal if the visitor rewrote current_word.
        """
        result = visitor(self.current_word)
        if result != self.current_word:
            logger.debug("%s: %s -> %s", name, self.current_word, result)
            self.add_removal(Removal(self.current_word, result, name))
            self.current_word = result


def is_consonant(word: str, i: int) -> bool:
    """
    A consonant is a letter other than a, e, i, o or u, and other than
    y preceded by a consonant. Anything that is not a letter counts as a
    consonant.
    """
    char = word[i]
    if char in VOWELS:
        return False
    if char != "y":
        return True

    # in a run of y's the classification alternates, starting from
    # whatever precedes the run
    start = i
    while start > 0 and word[start - 1] == "y":
        start -= 1
    first = start == 0 or word[start - 1] in VOWELS
    return first if (i - start) % 2 == 0 else not first


def is_vowel(word: str, i: int) -> bool:
    return not is_consonant(word, i)


def has_vowel(stem: str) -> bool:
    """
    Check if stem contains a vowel.
    """
    return any(is_vowel(stem, i) for i in range(len(stem)))


def has_double_consonant_suffix(word: str) -> bool:
    """
    Check if word ends with a doubled consonant, e.g. -tt, -ss.
    """
    if len(word) < 2:
        return False
    return word[-1] == word[-2] and is_consonant(word, len(word) - 1)


def is_CVC(word: str) -> bool:
    """
    Check if word ends consonant-vowel-consonant, where the second
    consonant is not w, x or y. Used to restore an e in hop(e), fil(e).
    """
    n = len(word)
    if n < 3 or word[-1] in "wxy":
        return False
    return is_consonant(word, n - 3) and is_vowel(word, n - 2) and is_consonant(word, n - 1)


def measure(word: str) -> int:
    """
    Count the VC sequences of word.

    With c a consonant sequence, v a vowel sequence and <..> arbitrary
    presence:
        <c><v>       gives 0
        <c>vc<v>     gives 1
        <c>vcvc<v>   gives 2
        <c>vcvcvc<v> gives 3
    """
    n = len(word)
    i = 0
    m = 0

    while i < n and is_consonant(word, i):
        i += 1

    while i < n:
        while i < n and is_vowel(word, i):
            i += 1
        if i >= n:
            break
        m += 1
        while i < n and is_consonant(word, i):
            i += 1

    return m


def check_replace(
    word: str,
    suffix: str,
    replacement: str,
    matched: Match,
    condition: Optional[Condition] = None,
) -> tuple[str, Match]:
    """
    Replace suffix of word with replacement if the remaining stem satisfies
    condition.

    Nothing happens once a group is already matched. A word ending in suffix
    is a match even when condition fails; the word is then returned as is,
    but the group is closed.
    """

    if matched is not Match.NONE or len(word) < len(suffix):
        return word, matched

    if suffix and not word.endswith(suffix):
        return word, matched

    stem = word[: len(word) - len(suffix)]
    if condition is not None and not condition(stem):
        return word, Match.BLOCKED

    return stem + replacement, Match.REWRITTEN


def apply_rules(
    word: str, rules: tuple[SuffixRule, ...], matched: Match = Match.NONE
) -> tuple[str, Match]:
    """
    Try a rule group against word, first structural match wins.
    """
    for rule in rules:
        word, matched = check_replace(
            word, rule.suffix, rule.replacement, matched, rule.condition
        )
    return word, matched


def _m_gt_0(stem: str) -> bool:
    return measure(stem) > 0


def _m_gt_1(stem: str) -> bool:
    return measure(stem) > 1


def _m_gt_1_and_s_or_t(stem: str) -> bool:
    return measure(stem) > 1 and stem[-1:] in ("s", "t")


def _m_eq_1_and_cvc(stem: str) -> bool:
    return measure(stem) == 1 and is_CVC(stem)


def _removable_e(stem: str) -> bool:
    m = measure(stem)
    return m > 1 or (m == 1 and not is_CVC(stem))


def _removable_l(stem: str) -> bool:
    # stem still ending in l means the word ended in -ll
    return measure(stem) > 1 and stem.endswith("l")


PLURAL_RULES = (
    SuffixRule("sses", "ss"),
    SuffixRule("ies", "i"),
    # keeps -ss away from the -s rule
    SuffixRule("ss", "ss"),
    SuffixRule("s", ""),
)

EED_RULES = (SuffixRule("eed", "ee", _m_gt_0),)

ED_ING_RULES = (
    SuffixRule("ed", "", has_vowel),
    SuffixRule("ing", "", has_vowel),
)

RESTORE_RULES = (
    SuffixRule("at", "ate"),
    SuffixRule("bl", "ble"),
    SuffixRule("iz", "ize"),
)

RESTORE_E_RULES = (SuffixRule("", "e", _m_eq_1_and_cvc),)

TERMINAL_Y_RULES = (SuffixRule("y", "i", has_vowel),)

# keyed by the penultimate letter of the word
DOUBLE_SUFFIX_RULES: dict[str, tuple[SuffixRule, ...]] = {
    "a": (
        SuffixRule("ational", "ate", _m_gt_0),
        SuffixRule("tional", "tion", _m_gt_0),
    ),
    "c": (
        SuffixRule("enci", "ence", _m_gt_0),
        SuffixRule("anci", "ance", _m_gt_0),
    ),
    "e": (SuffixRule("izer", "ize", _m_gt_0),),
    "g": (SuffixRule("logi", "log", _m_gt_0),),
    "l": (
        SuffixRule("bli", "ble", _m_gt_0),
        SuffixRule("alli", "al", _m_gt_0),
        SuffixRule("entli", "ent", _m_gt_0),
        SuffixRule("eli", "e", _m_gt_0),
        SuffixRule("ousli", "ous", _m_gt_0),
    ),
    "o": (
        SuffixRule("ization", "ize", _m_gt_0),
        SuffixRule("ation", "ate", _m_gt_0),
        SuffixRule("ator", "ate", _m_gt_0),
    ),
    "s": (
        SuffixRule("alism", "al", _m_gt_0),
        SuffixRule("iveness", "ive", _m_gt_0),
        SuffixRule("fulness", "ful", _m_gt_0),
        SuffixRule("ousness", "ous", _m_gt_0),
    ),
    "t": (
        SuffixRule("aliti", "al", _m_gt_0),
        SuffixRule("iviti", "ive", _m_gt_0),
        SuffixRule("biliti", "ble", _m_gt_0),
    ),
}

DERIVATIONAL_RULES = (
    SuffixRule("icate", "ic", _m_gt_0),
    SuffixRule("ative", "", _m_gt_0),
    SuffixRule("alize", "al", _m_gt_0),
    SuffixRule("iciti", "ic", _m_gt_0),
    SuffixRule("ical", "ic", _m_gt_0),
    SuffixRule("ful", "", _m_gt_0),
    SuffixRule("ness", "", _m_gt_0),
)

RESIDUAL_RULES = tuple(
    SuffixRule(suffix, "", _m_gt_1)
    for suffix in (
        "al", "ance", "ence", "er", "ic", "able", "ible", "ant", "ement", "ment", "ent",
    )
) + (SuffixRule("ion", "", _m_gt_1_and_s_or_t),) + tuple(
    SuffixRule(suffix, "", _m_gt_1)
    for suffix in ("ou", "ism", "ate", "iti", "ous", "ive", "ize")
)

FINAL_E_RULES = (SuffixRule("e", "", _removable_e),)

FINAL_LL_RULES = (SuffixRule("l", "", _removable_l),)


def step1a(word: str) -> str:
    """
    Remove plurals.

    caresses -> caress, ponies -> poni, caress -> caress, cats -> cat
    """
    return apply_rules(word, PLURAL_RULES)[0]


def step1b(word: str) -> str:
    """
    Remove -eed, -ed and -ing.

    feed -> feed, agreed -> agree, plastered -> plaster, motoring -> motor,
    conflated -> conflate, hopping -> hop, filing -> file
    """

    word, matched = apply_rules(word, EED_RULES)
    if matched is not Match.NONE:
        return word

    word, matched = apply_rules(word, ED_ING_RULES)
    if matched is not Match.REWRITTEN:
        return word

    word, matched = apply_rules(word, RESTORE_RULES)
    if (
        matched is Match.NONE
        and has_double_consonant_suffix(word)
        and word[-1] not in "lsz"
    ):
        word, matched = word[:-1], Match.REWRITTEN

    return apply_rules(word, RESTORE_E_RULES, matched)[0]


def step1c(word: str) -> str:
    """
    Replace terminal y by i when there is another vowel in the stem.
    """
    return apply_rules(word, TERMINAL_Y_RULES)[0]


def step2(word: str) -> str:
    """
    Map double suffixes to single ones, e.g. -ization -> -ize.
    """
    rules = DOUBLE_SUFFIX_RULES.get(word[-2:-1], ())
    return apply_rules(word, rules)[0]


def step3(word: str) -> str:
    """
    Deal with -ic-, -full, -ness etc.
    """
    return apply_rules(word, DERIVATIONAL_RULES)[0]


def step4(word: str) -> str:
    """
    Take off -ant, -ence etc., in context <c>vcvc<v>.
    """
    return apply_rules(word, RESIDUAL_RULES)[0]


def step5(word: str) -> str:
    """
    Remove a final -e and change -ll to -l, in context m > 1.
    """
    word = apply_rules(word, FINAL_E_RULES)[0]
    return apply_rules(word, FINAL_LL_RULES)[0]


VISITORS: list[tuple[str, Step]] = [
    ("step1a", step1a),
    ("step1b", step1b),
    ("step1c", step1c),
    ("step2", step2),
    ("step3", step3),
    ("step4", step4),
    ("step5", step5),
]
