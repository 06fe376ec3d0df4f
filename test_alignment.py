"""Passage tokenization and greedy live alignment."""
from read_practice.alignment.aligner import mark_words_as_read
from read_practice.alignment.tokenizer import PassageRenderer, tokenize_passage


def _read_words(units):
    return [u.text for u in units if u.read]


def test_tokenize_assigns_sequential_indices_and_keeps_case():
    units = tokenize_passage("The cat,  sat.")
    assert [(u.index, u.text, u.read) for u in units] == [
        (0, "The", False),
        (1, "cat,", False),
        (2, "sat.", False),
    ]


def test_renderer_interleaves_separators():
    renderer = PassageRenderer()
    renderer.tokenize("a  b\nc")
    assert [p if isinstance(p, str) else p.text for p in renderer.parts] == ["a", "  ", "b", "\n", "c"]


def test_renderer_html_marks_read_words_and_escapes():
    renderer = PassageRenderer()
    units = renderer.tokenize("Tom & <Jerry>")
    units[0].read = True
    assert renderer.to_html() == (
        '<span data-word-index="0" class="word-read">Tom</span> '
        '<span data-word-index="1">&amp;</span> '
        '<span data-word-index="2">&lt;Jerry&gt;</span>'
    )


def test_reset_restores_plain_text():
    renderer = PassageRenderer()
    renderer.tokenize("the cat")
    renderer.reset("the cat")
    assert renderer.units == []
    assert renderer.to_html() == "the cat"
    assert not renderer.annotated


def test_empty_passage_is_a_silent_noop():
    renderer = PassageRenderer()
    units = renderer.tokenize("the cat")
    assert renderer.tokenize("") is units
    renderer.reset(None)
    assert renderer.units is units
    assert tokenize_passage(None) == []


def test_reset_then_tokenize_is_repeatable():
    renderer = PassageRenderer()
    renderer.reset("see the cat run")
    first = [(u.index, u.text) for u in renderer.tokenize("see the cat run")]
    renderer.reset("see the cat run")
    second = [(u.index, u.text) for u in renderer.tokenize("see the cat run")]
    assert first == second


def test_reset_before_reattempt_clears_read_marks():
    renderer = PassageRenderer()
    mark_words_as_read("the cat", renderer.tokenize("the cat"))
    renderer.reset("the cat")
    assert not any(u.read for u in renderer.tokenize("the cat"))


def test_greedy_skip_leaves_omitted_word_unread():
    units = tokenize_passage("the cat sat")
    assert mark_words_as_read("the sat", units) == 2
    assert _read_words(units) == ["the", "sat"]


def test_incremental_transcript_marks_every_word():
    units = tokenize_passage("see the cat run")
    for transcript in ["see", "see the", "see the cat run"]:
        mark_words_as_read(transcript, units)
    assert all(u.read for u in units)


def test_punctuation_and_case_do_not_block_matches():
    units = tokenize_passage('"See," she said. The END!')
    mark_words_as_read("see she said the end", units)
    assert all(u.read for u in units)


def test_inserted_word_desynchronizes_until_next_coincidence():
    units = tokenize_passage("the cat sat on the mat")
    mark_words_as_read("the um cat sat", units)
    # "um" never matches, so the transcript cursor stalls there
    assert _read_words(units) == ["the"]


def test_marks_are_monotonic():
    units = tokenize_passage("the cat sat")
    mark_words_as_read("the cat sat", units)
    # A shorter, diverging transcript must not clear earlier marks
    assert mark_words_as_read("dog", units) == 0
    mark_words_as_read("the cat sat", units)
    assert all(u.read for u in units)


def test_repeat_calls_report_only_new_marks():
    units = tokenize_passage("see the cat")
    assert mark_words_as_read("see the", units) == 2
    assert mark_words_as_read("see the", units) == 0
    assert mark_words_as_read("see the cat", units) == 1


def test_empty_inputs_are_noops():
    units = tokenize_passage("the cat")
    assert mark_words_as_read("", units) == 0
    assert mark_words_as_read("?!", units) == 0
    assert mark_words_as_read("the cat", []) == 0
    assert not any(u.read for u in units)
