from quiz.normalize import norm_input, norm_text


def test_norm_text_collapses_whitespace():
    assert norm_text("  What   is\n\t1+1? ") == "What is 1+1?"
    assert norm_text("　") == ""
    assert norm_text(None) == ""


def test_norm_input_folds_fullwidth_digits():
    assert norm_input(" ２\n") == "2"
    assert norm_input("1 2") == "1 2"
