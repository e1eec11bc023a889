"""
NASM Pattern Compiler
=====================

Builds the regular expressions the line classifier and the editing engines
match against. Patterns are compiled once from the keyword tables and
reused on every line, so the cost of building large keyword alternations
is paid a single time per process.

Symbol Boundaries
-----------------
NASM identifiers may contain characters that regular expression ``\\b``
does not treat as word characters (``$ # @ ~ . ?``). Every keyword and
label pattern is therefore bounded by explicit look-arounds on the symbol
character class instead of ``\\b``:

    (?<![A-Za-z0-9_$#@~.?]) keyword (?![A-Za-z0-9_$#@~.?])

so that ``eax`` matches in ``mov eax, 1`` but not in ``.eax`` or
``eax$tmp``.

Fixed Rules
-----------
| Pattern          | Shape                                         |
|------------------|-----------------------------------------------|
| nonlocal label   | ``name:`` where name starts with A-Z, _ or ?  |
| local label      | ``.name`` with an optional colon              |
| constant         | ``$``? sign? digit, then radix characters     |
| section name     | ``section .name`` at the start of a line      |
| instruction field| optional prefix + one mnemonic, nothing else  |
| definition       | ``%define name`` / ``%macro name``            |
"""

from dataclasses import dataclass
from functools import lru_cache
import re
from typing import Iterable, Iterator, Pattern

from nasmkit.syntax.categories import Category
from nasmkit.syntax.keywords import DEFAULT_TABLES, KeywordSet, KeywordTables


# =============================================================================
# Character Classes
# =============================================================================

# Characters that may appear inside a NASM symbol
SYMBOL_CHARS = r"A-Za-z0-9_$#@~.?"

# Start and end of a symbol
SYMBOL_START = rf"(?<![{SYMBOL_CHARS}])"
SYMBOL_END = rf"(?![{SYMBOL_CHARS}])"

# First and following characters of a label name (no dot: dots mark locals)
LABEL_HEAD = r"[A-Za-z_?]"
LABEL_TAIL = r"[A-Za-z0-9_$#@~?]*"

NONLOCAL_LABEL = rf"{SYMBOL_START}({LABEL_HEAD}{LABEL_TAIL}){SYMBOL_END}[ \t]*:"
LOCAL_LABEL = rf"{SYMBOL_START}(\.{LABEL_HEAD}{LABEL_TAIL}){SYMBOL_END}(?:[ \t]*:)?"

CONSTANT = rf"{SYMBOL_START}\$?[-+]?[0-9][-+_0-9A-Fa-fHhXxDdTtQqOoBbYyeE.]*{SYMBOL_END}"

SECTION_NAME = rf"^[ \t]*section[ \t]+({SYMBOL_START}\.[A-Za-z0-9_#@.:]+{SYMBOL_END})"

DEFINITION = r"(%define|%macro)[ \t]+([A-Za-z0-9_$#@~.?]+)"


# =============================================================================
# Keyword Alternations
# =============================================================================

def keyword_alternation(words: Iterable[str]) -> str:
    """
    Build a non-capturing alternation of escaped keywords.

    Alternatives are ordered longest first, then alphabetically, giving a
    single deterministic order independent of table iteration order.
    """
    ordered = sorted(set(words), key=lambda word: (-len(word), word))
    return "(?:" + "|".join(re.escape(word) for word in ordered) + ")"


def compile_keywords(keywords: KeywordSet) -> Pattern[str]:
    """Compile a case-insensitive, symbol-bounded matcher for one table."""
    body = keyword_alternation(keywords)
    return re.compile(f"{SYMBOL_START}{body}{SYMBOL_END}", re.IGNORECASE)


def compile_directives(keywords: KeywordSet) -> Pattern[str]:
    """
    Compile a matcher for %-prefixed preprocessor directives.

    The ``%`` is part of each keyword; a ``%`` glued to a preceding symbol
    character (``foo%if``) does not start a directive.
    """
    body = keyword_alternation(keywords)
    return re.compile(rf"(?<![{SYMBOL_CHARS}%]){body}{SYMBOL_END}", re.IGNORECASE)


# =============================================================================
# Compiled Pattern Set
# =============================================================================

@dataclass(frozen=True)
class CompiledPatternSet:
    """
    Every pattern derived from one KeywordTables instance.

    Attributes:
        section_name: ``section .name`` declaration; group 1 is the name
        registers: Register names
        prefixes: Instruction prefixes
        types: Size and type keywords
        instructions: Instruction mnemonics and pseudo-instructions
        preprocessor: %-prefixed preprocessor directives
        nonlocal_label: Label with a trailing colon; group 1 is the name
        local_label: Dot label with optional colon; group 1 is the name
        label: Either label form
        constant: Numeric constant
        directives: Assembler directives
        instruction_field: Optional prefix and one mnemonic, whole text
        definition: ``%define``/``%macro`` with the defined name in group 2
    """
    section_name: Pattern[str]
    registers: Pattern[str]
    prefixes: Pattern[str]
    types: Pattern[str]
    instructions: Pattern[str]
    preprocessor: Pattern[str]
    nonlocal_label: Pattern[str]
    local_label: Pattern[str]
    label: Pattern[str]
    constant: Pattern[str]
    directives: Pattern[str]
    instruction_field: Pattern[str]
    definition: Pattern[str]

    def ordered(self) -> Iterator[tuple[Category, Pattern[str]]]:
        """
        Yield (category, pattern) pairs in classification precedence.

        First match wins: section name, register, prefix, type,
        instruction, preprocessor, nonlocal label, local label, constant,
        directive.
        """
        yield Category.SECTION_NAME, self.section_name
        yield Category.REGISTER, self.registers
        yield Category.PREFIX, self.prefixes
        yield Category.TYPE, self.types
        yield Category.INSTRUCTION, self.instructions
        yield Category.PREPROCESSOR, self.preprocessor
        yield Category.NONLOCAL_LABEL, self.nonlocal_label
        yield Category.LOCAL_LABEL, self.local_label
        yield Category.CONSTANT, self.constant
        yield Category.DIRECTIVE, self.directives


def compile_patterns(tables: KeywordTables) -> CompiledPatternSet:
    """
    Compile the full pattern set for a set of keyword tables.

    Args:
        tables: Keyword tables (already validated at construction)

    Returns:
        CompiledPatternSet ready for the classifier and engines
    """
    prefix_body = keyword_alternation(tables.prefixes)
    instruction_body = keyword_alternation(tables.instructions)
    instruction_field = rf"(?:{prefix_body}[ \t]+)?{instruction_body}"

    return CompiledPatternSet(
        section_name=re.compile(SECTION_NAME, re.IGNORECASE),
        registers=compile_keywords(tables.registers),
        prefixes=compile_keywords(tables.prefixes),
        types=compile_keywords(tables.types),
        instructions=compile_keywords(tables.instructions),
        preprocessor=compile_directives(tables.preprocessor),
        nonlocal_label=re.compile(NONLOCAL_LABEL),
        local_label=re.compile(LOCAL_LABEL),
        label=re.compile(f"{NONLOCAL_LABEL}|{LOCAL_LABEL}"),
        constant=re.compile(CONSTANT),
        directives=compile_keywords(tables.directives),
        instruction_field=re.compile(instruction_field, re.IGNORECASE),
        definition=re.compile(DEFINITION, re.IGNORECASE),
    )


@lru_cache(maxsize=None)
def default_patterns() -> CompiledPatternSet:
    """Return the process-wide pattern set for the built-in NASM tables."""
    return compile_patterns(DEFAULT_TABLES)
