from pathlib import Path

import pytest


# Twelve 10 letter words per 40 byte line, plus a 12 byte trailer so the
# stream does not divide evenly into 40 byte chunks (492 bytes total).
WORDS = (
    "brainstormremuneratedisabilityexperiment"
    "goalkeepervegetarianattachmentsystematic"
    "relaxationpermissiondifficultyconference"
    "revolutionassumptionallocationliterature"
    "inhabitantdependenceoccupationprotection"
    "hypothesisdisappointexcitementunpleasant"
    "temptationassessmentthoughtfulpresidency"
    "censorshipwildernessreluctanceacceptable"
    "houseplantinstrumentoverchargeconvulsion"
    "acceptancefastidiousredundancydecorative"
    "attractiontechnologyvegetationmotorcycle"
    "curriculumhypnothizestereotypefederation"
    "endofstream\n"
)

# Same text with two of the words replaced by 'x' (bytes 60-69 and 230-239).
WORDS_DIFF = (
    WORDS[:60] + "x" * 10 + WORDS[70:230] + "x" * 10 + WORDS[240:]
)


@pytest.fixture
def original_bytes() -> bytes:
    return WORDS.encode("ascii")


@pytest.fixture
def different_bytes() -> bytes:
    return WORDS_DIFF.encode("ascii")


@pytest.fixture
def original_file(tmp_path: Path, original_bytes: bytes) -> Path:
    path = tmp_path / "original.txt"
    path.write_bytes(original_bytes)
    return path


@pytest.fixture
def different_file(tmp_path: Path, different_bytes: bytes) -> Path:
    path = tmp_path / "newfile.txt"
    path.write_bytes(different_bytes)
    return path
