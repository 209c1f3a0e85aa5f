import pytest
from typer.testing import CliRunner
from anafind.cli import app

runner = CliRunner()

@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words"
    path.write_text("ant\ntan\nants\nat\ndots\ndote\n", encoding="utf-8")
    return str(path)

def test_find(words_file):
    result = runner.invoke(app, ["find", "ants", "--words", words_file])
    assert result.exit_code == 0
    assert result.output.split() == ["ant", "ants", "tan"]

def test_find_with_constraints(words_file):
    result = runner.invoke(app, ["find", "dotes", "-w", words_file, "-l", "4", "-p", "d.ts"])
    assert result.exit_code == 0
    assert result.output.split() == ["dots"]

def test_find_min_length(words_file):
    result = runner.invoke(app, ["find", "ants", "-w", words_file, "-m", "2"])
    assert result.exit_code == 0
    assert result.output.split() == ["ant", "ants", "at", "tan"]

def test_find_reads_words_from_env(words_file):
    result = runner.invoke(app, ["find", "ants"], env={"ANAFIND_WORDS": words_file})
    assert result.exit_code == 0
    assert result.output.split() == ["ant", "ants", "tan"]

def test_find_table(words_file):
    result = runner.invoke(app, ["find", "ants", "-w", words_file, "--table"])
    assert result.exit_code == 0
    assert "tan" in result.output
    assert "3 words" in result.output

def test_find_missing_word_list(tmp_path):
    result = runner.invoke(app, ["find", "ants", "-w", str(tmp_path / "missing")])
    assert result.exit_code == 1
    assert "Error" in result.output

def test_find_invalid_length(words_file):
    result = runner.invoke(app, ["find", "ants", "-w", words_file, "-l", "0"])
    assert result.exit_code == 1
    assert "Error" in result.output

def test_anagrams(words_file):
    result = runner.invoke(app, ["anagrams", "nat", "-w", words_file])
    assert result.exit_code == 0
    assert result.output.split() == ["ant", "tan"]

def test_signature():
    result = runner.invoke(app, ["-v", "signature", "Astonishment"])
    assert result.exit_code == 0
    assert result.output.strip() == "Sig:a1e1h1i1m1n2o1s2t2"
