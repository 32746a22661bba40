from cubetactoe.player import Player


def test_defaults():
    player = Player()
    assert player.name == ""
    assert player.symbol == "X"


def test_fields_are_stored_and_mutable():
    player = Player("P2", "O")
    assert (player.name, player.symbol) == ("P2", "O")
    player.name = "Alice"
    player.symbol = "X"
    assert (player.name, player.symbol) == ("Alice", "X")


def test_equality_by_value():
    assert Player("P1", "X") == Player("P1", "X")
    assert not Player("P1", "X") == Player("P1", "O")