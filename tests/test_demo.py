import pytest

from context_map import config


@pytest.mark.integration
def test_demo_walkthrough_output(capsys, reset_logging):
    from context_map.scripts.demo import main

    main()
    out = capsys.readouterr().out

    assert "person1 == person3: True" in out
    assert "person1 == person2: False" in out
    assert "Name: Kim Cheolsu, Age: 25" in out
    assert f"  applicationName: {config.APP_NAME}" in out
    assert "  sessionId: ''" in out
    assert "  sessionId present: False" in out
    assert "  timeoutSeconds (long): 30" in out
    assert "  timeoutSeconds (boolean): False" in out
    assert "  flags: ['A', 'B', 'C']" in out
    assert "  user id: 1001" in out
    assert "Age cannot be negative" in out


@pytest.mark.integration
def test_demo_entries_follow_insertion_order(capsys, reset_logging):
    from context_map.scripts.demo import main

    main()
    out = capsys.readouterr().out
    entries = out.split("All context entries:", 1)[1]

    assert entries.index("  name: Hong Gildong") < entries.index("  age: 30")
    assert entries.index("  age: 30") < entries.index("  applicationName:")
    assert entries.index("  applicationName:") < entries.index("  transactionId: TXN12345")
