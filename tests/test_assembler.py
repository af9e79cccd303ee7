from datetime import datetime, timedelta, timezone
from types import SimpleNamespace as Row

from app.services.assembler import assemble_client, assemble_client_workout, assemble_template

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def _template(id=1):
    return Row(id=id, user_id=7, name="Legs", description="", created_at=NOW)


def _tex(id, template_id, position, name=None):
    return Row(
        id=id,
        template_id=template_id,
        name=name or f"ex{id}",
        muscle_group="Legs",
        difficulty_level="Beginner",
        position=position,
    )


def _tset(id, exercise_id, set_number, weight=20.0, reps=10):
    return Row(id=id, exercise_id=exercise_id, set_number=set_number, weight=weight, reps=reps)


def test_template_orders_exercises_and_sets_regardless_of_row_order():
    exercises = [_tex(3, 1, 2), _tex(1, 1, 0), _tex(2, 1, 1)]
    sets = [_tset(10, 1, 3), _tset(11, 1, 1), _tset(12, 1, 2), _tset(13, 2, 2), _tset(14, 2, 1)]

    result = assemble_template(_template(), exercises, sets)

    assert [e.position for e in result.exercises] == [0, 1, 2]
    assert [e.id for e in result.exercises] == [1, 2, 3]
    assert [s.set_number for s in result.exercises[0].sets] == [1, 2, 3]
    assert [s.id for s in result.exercises[1].sets] == [14, 13]
    assert result.exercises[2].sets == []


def test_ties_keep_input_order():
    exercises = [_tex(5, 1, 0, "b"), _tex(4, 1, 0, "a"), _tex(6, 1, 0, "c")]
    sets = [_tset(21, 5, 1, weight=1), _tset(20, 5, 1, weight=2)]

    result = assemble_template(_template(), exercises, sets)

    assert [e.name for e in result.exercises] == ["b", "a", "c"]
    assert [s.weight for s in result.exercises[0].sets] == [1, 2]


def test_template_ignores_rows_of_other_parents():
    exercises = [_tex(1, 1, 0), _tex(2, 99, 0)]
    sets = [_tset(1, 1, 1), _tset(2, 2, 1)]

    result = assemble_template(_template(), exercises, sets)

    assert [e.id for e in result.exercises] == [1]
    assert [s.id for s in result.exercises[0].sets] == [1]


def test_missing_parent_returns_none():
    assert assemble_template(None, [], []) is None
    assert assemble_client_workout(None, [], []) is None
    assert assemble_client(None, [], [], []) is None


def test_empty_template_has_empty_exercises():
    result = assemble_template(_template(), [], [])
    assert result.exercises == []


def _client():
    return Row(id=1, user_id=7, name="Alice", email=None, created_at=NOW)


def _workout(id, created_at, client_id=1):
    return Row(
        id=id, client_id=client_id, template_id=None, name=f"w{id}", description="", created_at=created_at
    )


def test_client_without_workouts_renders_empty_list():
    result = assemble_client(_client(), [], [], [])
    assert result.workouts == []
    assert result.model_dump(by_alias=True)["workouts"] == []


def test_client_workouts_newest_first_with_mixed_timezones():
    naive_older = (NOW - timedelta(days=2)).replace(tzinfo=None)
    workouts = [
        _workout(1, naive_older),
        _workout(2, NOW),
        _workout(3, NOW - timedelta(days=1)),
        _workout(4, NOW, client_id=2),
    ]

    result = assemble_client(_client(), workouts, [], [])

    assert [w.id for w in result.workouts] == [2, 3, 1]


def test_client_workout_nests_by_client_workout_id():
    workout = _workout(1, NOW)
    exercises = [
        Row(id=2, client_workout_id=1, name="Squat", muscle_group="Legs",
            difficulty_level="Beginner", position=1),
        Row(id=1, client_workout_id=1, name="Lunge", muscle_group="Legs",
            difficulty_level="Beginner", position=0),
        Row(id=3, client_workout_id=2, name="Other", muscle_group="Legs",
            difficulty_level="Beginner", position=0),
    ]
    sets = [
        Row(id=1, client_exercise_id=2, set_number=2, weight=22.0, reps=10),
        Row(id=2, client_exercise_id=2, set_number=1, weight=20.0, reps=12),
    ]

    result = assemble_client_workout(workout, exercises, sets)

    assert [e.name for e in result.exercises] == ["Lunge", "Squat"]
    assert result.exercises[0].sets == []
    assert [(s.set_number, s.weight, s.reps) for s in result.exercises[1].sets] == [(1, 20.0, 12), (2, 22.0, 10)]


def test_response_uses_camel_case_keys():
    result = assemble_template(_template(), [_tex(1, 1, 0)], [_tset(1, 1, 1)])
    dumped = result.model_dump(by_alias=True)
    assert "userId" in dumped and "createdAt" in dumped
    exercise = dumped["exercises"][0]
    assert {"muscleGroup", "difficultyLevel", "position", "sets"} <= exercise.keys()
    assert exercise["sets"][0]["setNumber"] == 1
