import pytest

from yocto.errors import YoctoArithmeticError, YoctoArityError, YoctoTypeError
from yocto.types.nil import Nil


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(+ 1 2.5 3)", 6.5),
        ("(+ -1 5 -3)", 1),
        ("(- -10 -5)", -5),
        ("(/ -12 3)", -4),
        ("(+)", 0),
        ("(*)", 1),
        ("(- 5)", -5),
        ("(/ 4)", 0.25),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),  # 1 + 2*(7*4)
        ("(** 2 3)", 8),
        ("(** 9 0.5)", 3),
        ("(% 10 3)", 1),
        ("(% -7 3)", -1),
        ("(% 7.9 2)", 1),
    ]
)
def test_arithmetic(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(< 1 2 3)", True),
        ("(< 1 3 2)", False),
        ("(<= 1 1 2)", True),
        ("(> 3 2 1)", True),
        ("(>= 3 3 4)", False),
        ("(< 1)", True),
        ("(= 1 1 1)", True),
        ("(= 1 2)", False),
        ("(!= 1 2)", True),
        ('(= "a" "a")', True),
        ("(= (list 1 2) (list 1 2))", True),
        ("(= (list 1 2) (list 1 3))", False),
        ("(= true 1)", False),
        ("(= 'a 'a)", True),
        ("(not false)", True),
        ("(not ())", True),
        ("(not 0)", False),
    ]
)
def test_comparison_and_logic(run, source, expected):
    assert run(source) is expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(list 1 2)", [1, 2]),
        ("(list)", []),
        ("(cons 1 (list 2))", [1, 2]),
        ("(cons 1 ())", [1]),
        ("(car (list 1 2))", 1),
        ("(cdr (list 1 2))", [2]),
        ("(cdr (list))", []),
        ("(car (cdr (list 1 2 3)))", 2),
    ]
)
def test_list_builtins(run, source, expected):
    assert run(source) == expected


def test_car_of_empty_list_is_nil(run):
    assert run("(car (list))") is Nil


def test_cons_does_not_mutate(run):
    run("(def xs (list 2 3))")
    assert run("(cons 1 xs)") == [1, 2, 3]
    assert run("xs") == [2, 3]


@pytest.mark.parametrize(
    "source,error",
    [
        ("(/ 1 0)", YoctoArithmeticError),
        ("(/ 0)", YoctoArithmeticError),
        ("(% 1 0)", YoctoArithmeticError),
        ("(% (* 1e308 10) 2)", YoctoArithmeticError),
        ("(% 7 (- (* 1e308 10)))", YoctoArithmeticError),
        ("(% (- (* 1e308 10) (* 1e308 10)) 2)", YoctoArithmeticError),
        ("(** -8 0.5)", YoctoArithmeticError),
        ("(** 10 400)", YoctoArithmeticError),
        ('(+ 1 "a")', YoctoTypeError),
        ("(+ 1 true)", YoctoTypeError),
        ("(< 1 'b)", YoctoTypeError),
        ("(car 1)", YoctoTypeError),
        ("(cons 1 2)", YoctoTypeError),
        ("(-)", YoctoArityError),
        ("(/)", YoctoArityError),
        ("(** 2)", YoctoArityError),
        ("(% 1 2 3)", YoctoArityError),
        ("(<)", YoctoArityError),
        ("(not)", YoctoArityError),
        ("(car)", YoctoArityError),
    ]
)
def test_builtin_errors(run, source, error):
    with pytest.raises(error):
        run(source)


def test_print(run, capsys):
    assert run('(print "hi" 1 2.5 (list 1 "a") true)') is Nil
    assert capsys.readouterr().out == "hi 1 2.5 (1 a) true\n"
