from __future__ import annotations

import os
from pathlib import Path

from forms import load_source
from forms.testing import generate_source_files, generate_sources


def test_generated_corpus_on_disk(tmp_path: Path) -> None:
    seed = int(os.environ.get("FORMS_CORPUS_SEED", "1"))
    count = int(os.environ.get("FORMS_CORPUS_CASES", "200"))

    corpus_dir = tmp_path / "corpus"
    corpus_dir.mkdir(parents=True, exist_ok=True)

    files = generate_source_files(seed=seed, count=count)
    for rel, src in files:
        # Bytes, so no newline translation happens on the way to disk.
        (corpus_dir / rel).write_bytes(src.encode("utf-8"))

    for rel, src in files:
        buf = load_source(corpus_dir / rel)
        assert buf.text == src
        lines = src.split("\n")
        assert [buf.line_text(i) for i in range(buf.line_count)] == lines
        for offset in range(len(buf) + 1):
            pos = buf.offset_to_position(offset)
            assert buf.position_to_offset(pos) == offset, f"{rel}: {offset} -> {pos}"

    empty_rel, empty_src = files[0]
    assert empty_src == ""
    assert load_source(corpus_dir / empty_rel).all_line_lengths() == [0]


def test_corpus_is_deterministic_and_exercises_edge_cases() -> None:
    a = generate_sources(seed=7, count=100)
    assert a == generate_sources(seed=7, count=100)
    assert a[0] == ""
    assert any("\n\n" in src for src in a)
    assert any(src.endswith("\n") for src in a)
    assert any(src and not src.endswith("\n") for src in a)
    assert any(len(src.encode("utf-8")) > len(src) for src in a)
