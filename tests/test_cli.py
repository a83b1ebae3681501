from searchserver.cli import main


def test_main_prints_empty_request_count(capsys):
    assert main() == 0
    assert capsys.readouterr().out == "Total empty requests: 1437\n"


def test_main_accepts_empty_argv(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.startswith("Total empty requests: ")