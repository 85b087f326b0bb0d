from structlab.hash_table import HashTable
from structlab.records import (
    MonsterRecord,
    StudentRecord,
    format_monster_table,
    format_student_table,
)


def students():
    return [
        StudentRecord("Zac", 12345, 89),
        StudentRecord("Omid", 87654, 89),
        StudentRecord("Alexa", 80000, 34),
        StudentRecord("Siri", 55545, 84),
        StudentRecord("Google Home", 11111, 84),
    ]


def test_student_equality_by_id():
    assert StudentRecord("Siri", 55545, 84) == StudentRecord("Siri", 55545, 75)
    assert StudentRecord("Zac", 12345, 89) != StudentRecord("Zac", 87654, 89)


def test_student_hash_follows_id():
    lookup = {StudentRecord("Zac", 12345, 89): "first"}
    assert lookup[StudentRecord("Someone", 12345, 10)] == "first"
    assert StudentRecord("Zac", 87654, 89) not in lookup
    assert len({StudentRecord("A", 1, 1), StudentRecord("B", 1, 2)}) == 1


def test_monster_equality_by_name():
    assert MonsterRecord("Kobold", 12, 5, 30, 0.125) == MonsterRecord("Kobold", 1, 1, 1, 1.0)
    assert MonsterRecord("Kobold", 12, 5, 30, 0.125) != MonsterRecord("Ice Devil", 12, 5, 30, 0.125)


def test_monster_hash_follows_name():
    lookup = {MonsterRecord("Kobold", 12, 5, 30, 0.125): "small"}
    assert lookup[MonsterRecord("Kobold", 1, 1, 1, 1.0)] == "small"
    assert MonsterRecord("Ice Devil", 12, 5, 30, 0.125) not in lookup
    assert len({MonsterRecord("Kobold", 1, 2, 3, 4.0), MonsterRecord("Kobold", 5, 6, 7, 8.0)}) == 1


def test_student_scenario():
    table = HashTable(20)
    s = students()
    for index in (0, 2, 3, 4):
        table.insert(s[index])
    assert len(table) == 4

    assert s[2] in table
    assert s[1] not in table

    table.remove(s[0])
    table.insert(s[1])
    assert s[0] not in table
    assert s[1] in table

    table.insert(s[0])
    assert s[0] in table

    new_siri = StudentRecord("Siri", 55545, 75)
    table.remove(new_siri)
    table.insert(new_siri)
    assert len(table) == 5
    siri = next(item for item in table if item.id == 55545)
    assert siri.grade == 75


def test_worksheet_update_and_clear():
    table = HashTable(20)
    for student in students():
        table.insert(student)
    table.update(StudentRecord("Siri", 55545, 75))
    assert len(table) == 5
    assert {item.grade for item in table if item.name == "Siri"} == {75}
    assert table.max_load() >= 1
    table.clear()
    assert format_student_table(table) == "Table size: 0\n"


def test_format_student_table_layout():
    table = HashTable(20)
    table.insert(StudentRecord("Zac", 12345, 89))
    assert format_student_table(table) == (
        "Table size: 1\n" "Zac                 12345  89 \n"
    )


def test_format_student_table_line_count():
    table = HashTable(20)
    for student in students():
        table.insert(student)
    lines = format_student_table(table).splitlines()
    assert lines[0] == "Table size: 5"
    assert len(lines) == 6
    assert sorted(line.split()[0] for line in lines[1:] if line.split()[0] != "Google") == [
        "Alexa",
        "Omid",
        "Siri",
        "Zac",
    ]


def test_monster_scenario():
    table = HashTable(10)
    kobold = MonsterRecord("Kobold", 12, 5, 30, 0.125)
    devil = MonsterRecord("Ice Devil", 18, 180, 40, 14)
    table.insert(kobold)
    assert kobold in table
    table.remove(kobold)
    table.insert(devil)
    assert format_monster_table(table) == "Size: 1\nIce Devil 18 180 40 14\n"


def test_monster_fractional_rating():
    table = HashTable(10)
    table.insert(MonsterRecord("Kobold", 12, 5, 30, 0.125))
    assert format_monster_table(table) == "Size: 1\nKobold 12 5 30 0.125\n"