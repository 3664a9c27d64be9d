from lineards.tester import (
    algo_checker,
    array_tester,
    dynamic_array_tester,
    main,
    return_checker,
    singly_linked_list_tester,
    size_printer,
)


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_algo_checker(capsys):
    algo_checker(True)
    algo_checker(False)
    assert _lines(capsys) == ["Successfully", "Error"]


def test_size_printer(capsys):
    size_printer(7)
    assert _lines(capsys) == ["Data Structure Size: 7"]


def test_return_checker(capsys):
    return_checker(42)
    return_checker(None)
    assert _lines(capsys) == ["Value: 42", "No return value"]


def test_array_tester_output(capsys):
    array_tester()
    expected = (
        ["======= Array Tester ======="]
        + ["Successfully"] * 10
        + [
            "Value: 10",
            "No return value",
            "Error",
            "Error",
            "Data Structure Size: 3",
            "10, 50, 100",
        ]
    )
    assert _lines(capsys) == expected


def test_dynamic_array_matches_fixed_array(capsys):
    array_tester()
    fixed = _lines(capsys)
    dynamic_array_tester()
    dynamic = _lines(capsys)
    assert dynamic[0] == "======= Dynamic Array Tester ======="
    assert dynamic[1:] == fixed[1:]


def test_linked_list_tester_reverses(capsys):
    array_tester()
    fixed = _lines(capsys)
    singly_linked_list_tester()
    linked = _lines(capsys)
    assert linked[0] == "======= Singly Linked List Tester ======="
    assert linked[1:-3] == fixed[1:-1]
    displayed, reversal, reversed_display = linked[-3:]
    assert displayed.split() == fixed[-1].split(", ")
    assert reversal == "Successfully"
    assert reversed_display.split() == displayed.split()[::-1]


def test_main_runs_all_in_order(capsys):
    assert main([]) == 0
    lines = _lines(capsys)
    headers = [line for line in lines if line.startswith("=======")]
    assert headers == [
        "======= Array Tester =======",
        "======= Dynamic Array Tester =======",
        "======= Singly Linked List Tester =======",
    ]