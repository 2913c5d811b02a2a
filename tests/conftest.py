import pytest

ENGLISH_TEXT = (
    "It was a bright cold day in April, and the clocks were striking thirteen. "
    "The old town stood quiet under a pale sky, and the people who lived there "
    "went about their work as they had always done. In the morning the baker "
    "opened his shop before the sun was up, and the smell of fresh bread drifted "
    "along the narrow streets. Children walked to school in small groups, talking "
    "about the games they would play in the afternoon. Near the river an old man "
    "sat on a wooden bench and watched the water move slowly past the stones. He "
    "had lived in the town for most of his life and he remembered a time when the "
    "river was wider and the fields on the other side were full of sheep. Now there "
    "were houses where the fields had been, and a new road ran along the bank toward "
    "the city. Some of the people in the town were pleased with the changes, because "
    "the road brought visitors and the visitors brought money. Others missed the "
    "silence of the old days and the feeling that nothing important would ever happen "
    "there. In the evening the lights came on one by one, and the sound of voices from "
    "the open windows filled the street until late at night. When the last door was "
    "closed and the last light went out, the town rested again, waiting for another "
    "ordinary day to begin."
).encode("ascii")

PANGRAM = b"THEQUICKBROWNFOXJUMPSOVERTHELAZYDOG"


@pytest.fixture
def english_text():
    """About a thousand letters of plain English prose."""
    return ENGLISH_TEXT


@pytest.fixture
def pangram():
    return PANGRAM
