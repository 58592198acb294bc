from saltengine import log


def test_debug_format(capsys):
    log.debug("field added")
    assert capsys.readouterr().out == "[DEBUG]\tfield added\n"


def test_error_format(capsys):
    log.error("no texture")
    assert capsys.readouterr().out == "\t[ERROR]\tno texture\n"


def test_messages_keep_order(capsys):
    log.debug("one")
    log.error("two")
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["[DEBUG]\tone", "\t[ERROR]\ttwo"]