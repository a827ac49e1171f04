from harsh_realm.simulation import Simulation


def test_new_simulation_starts_at_turn_zero():
    assert Simulation().current_turn == 0


def test_process_turn_increments():
    sim = Simulation()
    sim.process_turn()
    assert sim.current_turn == 1


def test_many_turns_accumulate():
    sim = Simulation()
    for expected in range(1, 11):
        sim.process_turn()
        assert sim.current_turn == expected


def test_simulations_are_independent():
    first, second = Simulation(), Simulation()
    first.process_turn()
    assert second.current_turn == first.current_turn - 1