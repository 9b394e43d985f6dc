# obadh

A phonetic Bengali input method engine. Type Roman letters and get Bengali
script back: `k` gives ক, `kh` gives খ, `a` gives আ on its own or the vowel
sign া after a consonant, and consonants typed one after another are joined
into conjuncts.

## Installation

```
pip install .
```

## Interactive console

```
obadh
```

The console prints a short banner, then reads lines from standard input.
Each non-empty line is converted and printed; blank lines are ignored. It
stops at end of input (Ctrl+D) or on Ctrl+C.

```
> ami
আমি
> kotha
কথা
> bondhu
বন্ধু
```

## Using it from Python

```python
from obadh.processor import Processor

processor = Processor()
print(processor.process_input("ami"))   # আমি
```

Rules in brief:

- At each position the longest matching key (up to five characters) wins.
- A vowel typed alone, at the start of a word or after another vowel comes
  out as a full vowel; right after a consonant it becomes a vowel sign.
- Two consonants in a row form a conjunct through a hasanta (্).
  Typing `o` between them keeps them apart: `kotha` gives কথা.
- Case matters for `t/T`, `d/D`, `n/N`, `s/S` and `r/R`. For other letters
  an upper-case key with no mapping of its own falls back to its
  lower-case mapping, so `K` gives ক.
- Backslash sequences give special signs: `\^` chandrabindu (ঁ), `` \` ``
  hasanta (্), `\$` taka sign (৳), `\\` a literal backslash. Any other
  backslash passes through as is.
- Spaces, ASCII punctuation and any unmatched characters pass through
  unchanged. `obadh.processor.is_punctuation` tells which characters count
  as separators.

The characters the processor works with are described by
`obadh.types.BengaliChar`, a frozen pair of a `CharKind` (vowel, consonant,
vowel sign, special, symbol or compound) and its text.

A simpler, character-at-a-time engine is also available. It knows only
`k`, `kh`, `g` and `gh`, and returns `None` until the typed characters end
in one of them:

```python
from obadh.input_engine import InputEngine

engine = InputEngine()
engine.process_char("k")   # "ক"
engine.process_char("h")   # "খ"
```

Errors defined by the package derive from `obadh.errors.ObadhError`:
`InvalidInputError` and `SystemFailureError`.

## What it does not do

The package converts text and offers a line-based console. It does not hook
into a desktop input framework, so it cannot be selected as a keyboard input
method in other applications, and it has no settings file or dictionary-based
word suggestions.

## Running the tests

```
pip install ".[test]"
pytest
```