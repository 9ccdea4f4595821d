from sidekick_text.grammar import (
    ALL_CLEAR, Correction, apply_substitutions, correct, ensure_terminal_punctuation,
    fix_articles, fix_punctuation_spacing, rewrite, suggest,
)

LONG = (
    "i dont know if its correct!!! This is a very very long test sentence that just keeps "
    "going and going well past the twenty eight word threshold to trigger the length "
    "suggestion check for sure."
)

def test_empty_input():
    assert correct("") == Correction([ALL_CLEAR], "")

def test_blank_input_has_empty_rewrite():
    assert rewrite("   \n ") == ""
    assert correct("   ").suggestions == ["Remove repeated spaces."]

def test_long_draft_scenario():
    suggestions, text = correct(LONG)
    assert suggestions == [
        "Avoid excessive punctuation.",
        "Split 1 long sentence(s) (>28 words) for clarity.",
    ]
    assert "I don't know" in text
    assert "!!! " not in text
    assert text.endswith("for sure.")

def test_article_scenario():
    out = correct("a apple and an banana").rewrite
    assert "an apple" in out.lower()
    assert "a banana" in out
    assert out == "An apple and a banana."

def test_checks_fire_in_order():
    assert suggest("This  was finished!!!") == [
        "Remove repeated spaces.",
        "Avoid excessive punctuation.",
        "Prefer active voice where possible.",
    ]

def test_all_clear():
    assert suggest("Sam baked the cake.") == [ALL_CLEAR]

def test_passive_check_is_coarse():
    assert suggest("The cake was baked by Sam.") == ["Prefer active voice where possible."]
    # any -ed word after an auxiliary counts
    assert suggest("The apple IS red.") == ["Prefer active voice where possible."]

def test_long_sentence_count():
    s = "Word " + " ".join(["word"] * 28) + "."
    assert suggest(s + " " + s) == ["Split 2 long sentence(s) (>28 words) for clarity."]
    ok = "Word " + " ".join(["word"] * 27) + "."
    assert suggest(ok) == [ALL_CLEAR]

def test_punctuation_spacing():
    assert fix_punctuation_spacing("Hello ,world !How") == "Hello, world! How"
    assert fix_punctuation_spacing("Done.") == "Done."
    assert fix_punctuation_spacing("Wait!!! Now") == "Wait! ! ! Now"

def test_substitutions():
    assert apply_substitutions("i think im sure they dont CANT") == "I think I'm sure they don't can't"
    assert apply_substitutions("in order to utilize it") == "to use it"
    assert apply_substitutions("due to the fact that it rained") == "because it rained"
    assert apply_substitutions("a very big deal") == "a  big deal"
    assert apply_substitutions("Isnt it, wasnt it") == "isn't it, wasn't it"

def test_substitutions_do_not_touch_inner_words():
    assert apply_substitutions("the iris is everywhere") == "the iris is everywhere"

def test_articles_keep_case():
    assert fix_articles("A owl and An cat") == "An owl and A cat"
    assert fix_articles("banana apple") == "banana apple"

def test_removed_filler_feeds_article_fix():
    assert rewrite("a very apple") == "An apple."

def test_terminal_punctuation():
    assert ensure_terminal_punctuation("No end") == "No end."
    assert ensure_terminal_punctuation("Wow!") == "Wow!"
    assert ensure_terminal_punctuation('He said "hi."') == 'He said "hi."'
    assert ensure_terminal_punctuation("") == "."

def test_sentence_case_only_touches_first_letters():
    assert rewrite("hello there. General Kenobi! yes") == "Hello there. General Kenobi! yes."

def test_idempotent():
    assert correct(LONG) == correct(LONG)

def test_text_that_rewrites_to_nothing_still_gets_a_period():
    assert rewrite("very") == "."
    assert correct("very very").rewrite == "."
