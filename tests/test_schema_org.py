"""schema.org JSON-LD 生成のテスト"""
import json

from opening_times.services.schema_org import (
    SchemaHooks, opening_hours_specification, opening_hours_schema, render_schema_script,
)

from conftest import NINE_TO_FIVE, make_week, weekdays_nine_to_five

ENABLED = SchemaHooks(enabled=lambda: True)


class TestSpecification:
    def test_weekdays(self):
        spec = opening_hours_specification(weekdays_nine_to_five())
        assert spec == [{
            "@type": "OpeningHoursSpecification",
            "dayOfWeek": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"],
            "opens": "09:00:00",
            "closes": "17:00:00",
        }]

    def test_groups_non_adjacent_days(self):
        week = make_week(
            monday=NINE_TO_FIVE, tuesday=("10:00 am", "2:00 pm"), thursday=NINE_TO_FIVE,
        )
        spec = opening_hours_specification(week)
        assert [s["dayOfWeek"] for s in spec] == [["Monday", "Thursday"], ["Tuesday"]]
        assert spec[1]["opens"] == "10:00:00"
        assert spec[1]["closes"] == "14:00:00"

    def test_closed_days_are_omitted(self):
        week = make_week(saturday=("", "5:00 pm"), sunday=("9:00 am", ""))
        assert opening_hours_specification(week) == []

    def test_unparsable_time_becomes_empty(self):
        week = make_week(monday=("9:00 am", "late"))
        spec = opening_hours_specification(week)
        assert spec[0]["opens"] == "09:00:00"
        assert spec[0]["closes"] == ""


class TestSchema:
    def test_disabled_by_default(self):
        assert opening_hours_schema(weekdays_nine_to_five(), "https://example.com") is None

    def test_enabled(self):
        schema = opening_hours_schema(weekdays_nine_to_five(), "https://example.com/", ENABLED)
        assert schema["@context"] == "https://schema.org"
        assert schema["@type"] == "LocalBusiness"
        assert schema["@id"] == "https://example.com#localbusiness"
        assert len(schema["openingHoursSpecification"]) == 1

    def test_no_entries(self):
        assert opening_hours_schema(make_week(), "https://example.com", ENABLED) is None

    def test_merge_hook(self):
        def merge(schema):
            return {**schema, "name": "Corner Shop"}

        hooks = SchemaHooks(enabled=lambda: True, merge=merge)
        schema = opening_hours_schema(weekdays_nine_to_five(), "https://example.com", hooks)
        assert schema["name"] == "Corner Shop"
        assert schema["@type"] == "LocalBusiness"


class TestRenderScript:
    def test_empty(self):
        assert render_schema_script(None) == ""

    def test_script_block(self):
        schema = {"@id": "https://example.com#localbusiness"}
        html = render_schema_script(schema)
        assert html.startswith('<script type="application/ld+json">')
        # スラッシュはエスケープしない
        assert "https://example.com#localbusiness" in html
        body = html.split("\n", 1)[1].rsplit("\n", 1)[0]
        assert json.loads(body) == schema

    def test_script_end_tag_is_neutralised(self):
        html = render_schema_script({"name": "</script><b>"})
        assert html.count("</script>") == 1
