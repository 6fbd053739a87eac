import pytest

from tarnished.constants import DIALOGUE_LINE_MAX_LENGTH, DIALOGUE_MAX_LENGTH, Prompt
from tarnished.dialogue import dialogue_line, load_dialogue

SPEAKING_PROMPTS = [p for p in Prompt if p is not Prompt.NONE]


@pytest.mark.parametrize("prompt", SPEAKING_PROMPTS)
@pytest.mark.parametrize("number", range(1, 6))
def test_dialogue_is_padded_to_full_length(prompt, number):
    text = load_dialogue(prompt, number)
    assert len(text) == DIALOGUE_MAX_LENGTH
    assert text.strip() != ""
    assert text == text.rstrip().ljust(DIALOGUE_MAX_LENGTH)


def test_known_dialogue_text():
    assert load_dialogue(Prompt.ENEMY_TILE, 1).rstrip() == "Oh no! I think we were spotted"
    assert load_dialogue(Prompt.BOSS_TILE, 2).rstrip() == "Even a boss is no match for us!"


def test_dialogue_accepts_plain_ints():
    assert load_dialogue(3, 4) == load_dialogue(Prompt.ENEMY_TILE, 4)


def test_dialogues_differ_within_a_prompt():
    texts = {load_dialogue(Prompt.LOCKED_TILE, n) for n in range(1, 6)}
    assert len(texts) == 5


@pytest.mark.parametrize("number", [0, 6, -1])
def test_bad_number_raises(number):
    with pytest.raises(ValueError):
        load_dialogue(Prompt.EMPTY_TILE, number)


@pytest.mark.parametrize("prompt", [Prompt.NONE, 42])
def test_bad_prompt_raises(prompt):
    with pytest.raises(ValueError):
        load_dialogue(prompt, 1)


def test_first_line_is_first_chunk():
    text = load_dialogue(Prompt.EMPTY_TILE, 1)
    assert dialogue_line(0, text) == " " + text[:DIALOGUE_LINE_MAX_LENGTH] + " "


@pytest.mark.parametrize("line", range(9))
def test_line_width_is_fixed(line):
    text = load_dialogue(Prompt.NEW_UNLOCKED_TILE, 3)
    result = dialogue_line(line, text)
    assert len(result) == DIALOGUE_LINE_MAX_LENGTH + 2
    assert result.startswith(" ") and result.endswith(" ")


def test_leading_space_is_shifted_out():
    text = ("A" * 26 + " " + "B" * 25).ljust(DIALOGUE_MAX_LENGTH)
    assert dialogue_line(1, text) == " " + "B" * 25 + "  "


@pytest.mark.parametrize("prompt", SPEAKING_PROMPTS)
def test_lines_keep_every_word(prompt):
    text = load_dialogue(prompt, 3)
    joined = "".join(dialogue_line(n, text) for n in range(9))
    assert joined.replace(" ", "") == text.replace(" ", "")


def test_lines_past_the_end_are_blank():
    text = load_dialogue(Prompt.ENEMY_TILE, 1)
    assert dialogue_line(20, text).strip() == ""


def test_negative_line_raises():
    with pytest.raises(ValueError):
        dialogue_line(-1, load_dialogue(Prompt.ENEMY_TILE, 1))