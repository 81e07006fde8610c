import pytest

from field_lines import Charge, ChargeSet


def test_place_assigns_ids_and_magnitude():
    cs = ChargeSet()
    a = cs.place((300, 300))
    b = cs.place((700, 300), polarity=-1)
    assert (a.id, b.id) == (1, 2)
    assert a.q == 1e-6 and b.q == -1e-6
    assert a.position == (300.0, 300.0)
    assert len(cs) == 2
    assert cs.version == 2


def test_place_rejects_bad_polarity_and_magnitude():
    cs = ChargeSet()
    with pytest.raises(ValueError):
        cs.place((0, 0), polarity=0)
    with pytest.raises(ValueError):
        cs.place((0, 0), magnitude=0.0)
    assert len(cs) == 0


def test_move_replaces_charge_value():
    cs = ChargeSet()
    a = cs.place((300, 300))
    snap = cs.snapshot()
    moved = cs.move(a.id, (350.5, 120.0))
    assert moved.position == (350.5, 120.0)
    assert moved.id == a.id and moved.q == a.q
    assert cs.get(a.id) == moved
    # Earlier snapshots are unaffected by later drags.
    assert snap[0].position == (300.0, 300.0)


def test_unknown_id_raises():
    cs = ChargeSet()
    with pytest.raises(KeyError):
        cs.move(42, (0, 0))
    with pytest.raises(KeyError):
        cs.remove(42)


def test_remove_and_clear():
    cs = ChargeSet()
    a = cs.place((100, 100))
    b = cs.place((200, 100), polarity=-1)
    assert cs.remove(a.id) == a
    assert cs.snapshot() == (b,)
    cs.clear()
    assert cs.snapshot() == ()
    c = cs.place((10, 10))
    assert c.id == 3


def test_query_point_picks_first_within_radius():
    """Drag picking: strict radius test, first charge in placement order wins."""
    cs = ChargeSet()
    a = cs.place((100, 100))
    b = cs.place((110, 100), polarity=-1)
    assert cs.query_point((105, 100)) == a
    assert cs.query_point((125, 100)) == b
    assert cs.query_point((130, 100)) is None
    assert cs.query_point((80, 100)) is None


def test_existing_charges_keep_id_sequence():
    cs = ChargeSet(charges=[Charge(position=(0, 0), q=1e-6, id=7)])
    assert cs.place((5, 5)).id == 8


def test_unassigned_and_repeated_ids_are_renumbered():
    """Charges built without ids get 1..n; a repeated id is replaced after the highest one."""
    cs = ChargeSet(charges=[Charge(position=(0, 0), q=1e-6), Charge(position=(10, 0), q=-1e-6)])
    assert [c.id for c in cs] == [1, 2]
    assert cs.get(2).q == -1e-6
    assert cs.place((20, 0)).id == 3

    mixed = ChargeSet(charges=[
        Charge(position=(0, 0), q=1e-6, id=4),
        Charge(position=(10, 0), q=1e-6, id=4),
        Charge(position=(20, 0), q=1e-6),
    ])
    assert [c.id for c in mixed] == [4, 5, 6]
    assert [c.position for c in mixed] == [(0.0, 0.0), (10.0, 0.0), (20.0, 0.0)]


def test_charge_value_semantics():
    c = Charge(position=[1, 2], q=-3e-6)
    assert c.position == (1.0, 2.0)
    assert c.polarity == -1
    assert Charge(position=(0, 0), q=0.0).polarity == -1
    assert c.moved_to((4, 6)).distance_to((1, 2)) == 5.0
    with pytest.raises(AttributeError):
        c.q = 1.0
