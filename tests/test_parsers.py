"""Tests for CSV parsing."""

import pytest

from ufc_dashboard.data import FightRecord, FighterRecord, parse_fight_csv, parse_fighter_csv
from ufc_dashboard.data.parsers import split_row, to_int, to_number

FIGHTER_HEADER = (
    "id,name,nick_name,wins,losses,draws,height,weight,reach,stance,dob,"
    "splm,str_acc,sapm,str_def,td_avg,td_avg_acc,td_def,sub_avg"
)
FIGHT_HEADER = (
    "event_name,event_id,fight_id,r_name,r_id,b_name,b_id,division,"
    "title_fight,method,finish_round,match_time_sec"
)


def fighter_line(fid="1", name="X", wins="10", losses="0", draws="0", str_acc="50"):
    return (
        f"{fid},{name},The X,{wins},{losses},{draws},180.34,77.11,187.96,Orthodox,"
        f"1990-05-15,4.5,{str_acc},3.2,55,1.5,40,70,0.5"
    )


class TestToNumber:
    """Test numeric coercion."""

    def test_valid_numbers(self):
        assert to_number("12.5") == 12.5
        assert to_number("-3") == -3
        assert to_number(" 7 ") == 7

    def test_invalid_input_is_zero(self):
        assert to_number("") == 0
        assert to_number("abc") == 0
        assert to_number("--") == 0
        assert to_number(None) == 0

    def test_never_nan_or_infinite(self):
        assert to_number("nan") == 0
        assert to_number("inf") == 0
        assert to_number("-Infinity") == 0

    def test_only_plain_number_forms(self):
        assert to_number("1_000") == 0
        assert to_number("\u0661\u0662") == 0
        assert to_number("12abc") == 0
        assert to_number("1e3") == 1000
        assert to_number(".5") == 0.5
        assert to_number("+4") == 4
        assert to_number("0x10") == 16

    def test_to_int_truncates(self):
        assert to_int("12.9") == 12
        assert to_int("x") == 0


class TestSplitRow:
    def test_strips_whitespace_and_quotes(self):
        assert split_row(' "a" , b ,"c"') == ["a", "b", "c"]

    def test_keeps_empty_fields(self):
        assert split_row("a,,c") == ["a", "", "c"]


class TestFighterParser:
    """Test fighter CSV parsing."""

    def test_parses_rows_positionally(self):
        content = "\n".join([FIGHTER_HEADER, fighter_line()])
        result = parse_fighter_csv(content)

        assert len(result) == 1
        fighter = result.records[0]
        assert isinstance(fighter, FighterRecord)
        assert fighter.fighter_id == "1"
        assert fighter.name == "X"
        assert fighter.nickname == "The X"
        assert fighter.wins == 10
        assert fighter.stance == "Orthodox"
        assert fighter.dob == "1990-05-15"
        assert fighter.str_acc == 50
        assert fighter.sub_avg == 0.5

    def test_header_is_discarded(self):
        result = parse_fighter_csv(FIGHTER_HEADER + "\n")
        assert result.records == []
        assert result.skipped == 0

    def test_short_rows_are_skipped(self):
        content = "\n".join(
            [
                FIGHTER_HEADER,
                fighter_line(fid="1"),
                "2,Short,Row,1,2,3",
                fighter_line(fid="3"),
            ]
        )
        result = parse_fighter_csv(content)

        assert [f.fighter_id for f in result.records] == ["1", "3"]
        assert result.skipped == 1

    def test_blank_lines_are_ignored(self):
        content = "\n".join([FIGHTER_HEADER, "", fighter_line(), "   ", ""])
        result = parse_fighter_csv(content)
        assert len(result) == 1
        assert result.skipped == 0

    def test_non_numeric_cells_default_to_zero(self):
        line = "9,Y,,--,abc,,,,,,,,,,,,,,"
        result = parse_fighter_csv(FIGHTER_HEADER + "\n" + line)

        fighter = result.records[0]
        assert fighter.wins == 0
        assert fighter.losses == 0
        assert fighter.draws == 0
        assert fighter.height == 0
        assert fighter.nickname == ""
        assert fighter.stance == ""

    def test_quoted_fields_are_unwrapped(self):
        line = fighter_line(name='"Quoted Name"')
        result = parse_fighter_csv(FIGHTER_HEADER + "\n" + line)
        assert result.records[0].name == "Quoted Name"

    def test_crlf_line_endings(self):
        content = FIGHTER_HEADER + "\r\n" + fighter_line() + "\r\n"
        result = parse_fighter_csv(content)
        assert len(result) == 1
        assert result.records[0].sub_avg == 0.5

    def test_non_text_input_raises(self):
        with pytest.raises(TypeError):
            parse_fighter_csv(b"id,name")


class TestFightParser:
    """Test fight CSV parsing."""

    def test_parses_rows_positionally(self):
        line = "UFC 1,E1,F1,A,R1,B,B1,lightweight,1,KO/TKO,1,120"
        result = parse_fight_csv(FIGHT_HEADER + "\n" + line)

        assert len(result) == 1
        fight = result.records[0]
        assert isinstance(fight, FightRecord)
        assert fight.event_name == "UFC 1"
        assert fight.red_name == "A"
        assert fight.blue_id == "B1"
        assert fight.division == "lightweight"
        assert fight.title_fight == 1
        assert fight.is_title_fight
        assert fight.method == "KO/TKO"
        assert fight.finish_round == 1
        assert fight.match_time_sec == 120

    def test_multiline_quoted_field_is_one_record(self):
        content = "\n".join(
            [
                FIGHT_HEADER,
                '"line one',
                'line two",E1,F1,A,R1,B,B1,lightweight,0,Submission,2,300',
                "UFC 2,E2,F2,C,R2,D,B2,flyweight,0,KO/TKO,1,60",
            ]
        )
        result = parse_fight_csv(content)

        assert len(result) == 2
        assert result.records[0].event_name == "line one\nline two"
        assert result.records[0].method == "Submission"
        assert result.records[1].event_name == "UFC 2"

    def test_short_rows_are_skipped(self):
        content = "\n".join(
            [
                FIGHT_HEADER,
                "UFC 1,E1,F1,A,R1,B,B1,lightweight,0,KO/TKO,1,120",
                "bad,row",
                "UFC 3,E3,F3,A,R1,B,B1,lightweight,0,Submission,1,200",
            ]
        )
        result = parse_fight_csv(content)

        assert [f.fight_id for f in result.records] == ["F1", "F3"]
        assert result.skipped == 1

    def test_blank_lines_are_ignored(self):
        content = "\n".join(
            [FIGHT_HEADER, "", "UFC 1,E1,F1,A,R1,B,B1,lightweight,0,KO/TKO,1,120", ""]
        )
        result = parse_fight_csv(content)
        assert len(result) == 1
        assert result.skipped == 0

    def test_unterminated_quote_does_not_raise(self):
        content = "\n".join(
            [
                FIGHT_HEADER,
                "UFC 1,E1,F1,A,R1,B,B1,lightweight,0,KO/TKO,1,120",
                '"never closed,E2,F2,A,R1,B,B1,lightweight,0,KO/TKO,1,120',
                "UFC 3,E3,F3,A,R1,B,B1,lightweight,0,KO/TKO,1,120",
            ]
        )
        result = parse_fight_csv(content)

        assert [f.fight_id for f in result.records] == ["F1"]
        assert result.skipped == 1

    def test_non_numeric_cells_default_to_zero(self):
        line = "UFC 1,E1,F1,A,R1,B,B1,lightweight,,Decision - Split,--,abc"
        fight = parse_fight_csv(FIGHT_HEADER + "\n" + line).records[0]

        assert fight.title_fight == 0
        assert fight.finish_round == 0
        assert fight.match_time_sec == 0

    def test_empty_input(self):
        assert parse_fight_csv("").records == []
        assert parse_fighter_csv("").records == []

    def test_non_text_input_raises(self):
        with pytest.raises(TypeError):
            parse_fight_csv(None)
