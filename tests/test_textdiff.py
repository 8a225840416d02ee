from docdiff.textdiff import AnsiMarkup, diff_lines, diff_words


def test_diff_words_replacement():
    assert diff_words("the quick fox", "the slow fox") == "the <del>quick</del><ins>slow</ins> fox"


def test_diff_words_insertion_and_deletion():
    assert diff_words("a b", "a b c") == "a b<ins> c</ins>"
    assert diff_words("a b c", "a c") == "a <del>b </del>c"


def test_diff_words_escapes_markup():
    out = diff_words("<p>old</p>", "<p>new</p>")
    assert out == "<del>&lt;p&gt;old&lt;/p&gt;</del><ins>&lt;p&gt;new&lt;/p&gt;</ins>"


def test_diff_words_identical():
    assert diff_words("same text", "same text") == "same text"


def test_diff_lines():
    assert diff_lines("a\nb", "a\nc") == "a\n<del>b\n</del><ins>c\n</ins>"


def test_ansi_markup_keeps_text():
    out = diff_words("one two", "one three", AnsiMarkup)
    assert "one " in out
    assert "two" in out
    assert "three" in out
    assert "<del>" not in out
