import pytest

from roshambo.config import GameConfig


@pytest.fixture
def cfg():
    return GameConfig(
        beaten_by={"rock": ["paper"], "paper": ["scissors"], "scissors": ["rock"]},
        seed=1234,
    )


class ScriptedInput:
    """Feeds a fixed list of answers to the game."""

    def __init__(self, answers):
        self.answers = list(answers)

    def next_input(self):
        return self.answers.pop(0)


@pytest.fixture
def scripted():
    return ScriptedInput
