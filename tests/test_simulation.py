import io

from philosophers.args import Rules
from philosophers.simulation import Philosopher, Table, run_single
from philosophers.timing import now_ms

STATUSES = {"is thinking", "has taken a fork", "is eating", "is sleeping"}


def _rules(nb=2, die=1000, eat=10, sleep=10, must=None):
    return Rules(
        nb_philo=nb,
        time_to_die=die,
        time_to_eat=eat,
        time_to_sleep=sleep,
        must_eat_count=must,
    )


def test_table_seats_philosophers_in_order():
    table = Table(_rules(nb=3), io.StringIO())
    assert [p.id for p in table.philosophers] == [1, 2, 3]
    assert all(p.meals_eaten == 0 for p in table.philosophers)
    assert all(p.last_meal == table.start_time for p in table.philosophers)
    assert len(table.forks) == 3


def test_fork_indexes_wrap_around():
    table = Table(_rules(nb=3), io.StringIO())
    assert [(p.left_fork, p.right_fork) for p in table.philosophers] == [
        (0, 1),
        (1, 2),
        (2, 0),
    ]


def test_take_and_release_forks():
    table = Table(_rules(nb=3), io.StringIO())
    philosopher = table.philosophers[1]
    philosopher.take_forks()
    assert table.forks[1].locked()
    assert table.forks[2].locked()
    assert not table.forks[0].locked()
    philosopher.release_forks()
    assert not any(fork.locked() for fork in table.forks)


def test_check_meals_without_requirement():
    out = io.StringIO()
    table = Table(_rules(), out)
    assert table.check_meals() is False
    assert table.is_over() is False
    assert out.getvalue() == ""


def test_check_meals_zero_required_ends_at_once():
    out = io.StringIO()
    table = Table(_rules(must=0), out)
    assert table.check_meals() is True
    assert table.is_over() is True
    assert out.getvalue() == "all philosophers have finished their meals\n"


def test_check_meals_waits_for_everyone():
    out = io.StringIO()
    table = Table(_rules(must=2), out)
    table.philosophers[0].meals_eaten = 2
    assert table.check_meals() is False
    table.philosophers[1].meals_eaten = 3
    assert table.check_meals() is True


def test_check_death_of_fed_philosopher():
    out = io.StringIO()
    table = Table(_rules(die=1000), out)
    assert table.check_death(table.philosophers[0]) is False
    assert out.getvalue() == ""


def test_check_death_reports_once():
    out = io.StringIO()
    table = Table(_rules(die=100), out)
    starving = table.philosophers[1]
    starving.last_meal = now_ms() - 500
    assert table.check_death(starving) is True
    assert table.is_over() is True
    first = out.getvalue()
    elapsed, ident, word = first.split()
    assert ident == "2"
    assert word == "died"
    assert int(elapsed) >= 500
    assert table.check_death(starving) is True
    assert out.getvalue() == first


def test_print_status_format_and_silence_after_end():
    out = io.StringIO()
    table = Table(_rules(must=0), out)
    table.print_status(table.philosophers[0], "is thinking")
    line = out.getvalue()
    stamp, ident, rest = line.rstrip("\n").split(" ", 2)
    assert int(stamp) >= 0
    assert ident == "1"
    assert rest == "is thinking"
    table.check_meals()
    table.print_status(table.philosophers[0], "is eating")
    assert "is eating" not in out.getvalue()


def test_run_until_everyone_has_eaten():
    out = io.StringIO()
    table = Table(_rules(nb=2, die=1000, eat=10, sleep=10, must=2), out)
    table.run()
    lines = out.getvalue().splitlines()
    assert lines[-1] == "all philosophers have finished their meals"
    assert all(p.meals_eaten >= 2 for p in table.philosophers)
    for line in lines[:-1]:
        stamp, ident, status = line.split(" ", 2)
        assert int(stamp) >= 0
        assert ident in {"1", "2"}
        assert status in STATUSES


def test_run_ends_with_a_death():
    out = io.StringIO()
    table = Table(_rules(nb=2, die=50, eat=200, sleep=10), out)
    table.run()
    lines = out.getvalue().splitlines()
    assert lines[-1].endswith(" died")
    assert sum(line.endswith(" died") for line in lines) == 1
    assert table.is_over() is True


def test_routine_stops_when_already_over():
    out = io.StringIO()
    table = Table(_rules(must=0), out)
    table.check_meals()
    philosopher = Philosopher(table, 1)
    philosopher.routine()
    assert philosopher.meals_eaten == 0
    assert out.getvalue() == "all philosophers have finished their meals\n"


def test_run_single():
    out = io.StringIO()
    run_single(_rules(nb=1, die=20), out)
    assert out.getvalue() == "0 1 is thinking\n20 1 died\n"