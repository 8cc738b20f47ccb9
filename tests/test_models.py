"""Unit tests for data models"""
import pytest
from pydantic import ValidationError
from linq_quiz.models.config import Config
from linq_quiz.models.family import Family, Person
from linq_quiz.models.report import FamilySummary, LetterOccurrence


class TestFamilyModels:
    """Test family input models"""

    def test_person_accepts_alias_and_field_name(self):
        """Test that Person accepts Age and age"""
        assert Person.model_validate({"Age": 12}).age == 12
        assert Person(age=12).age == 12

    def test_person_requires_age(self):
        """Test that a missing age is rejected"""
        with pytest.raises(ValidationError):
            Person.model_validate({})

    def test_family_defaults_to_no_persons(self):
        """Test that persons default to an empty list"""
        family = Family(id=1)
        assert family.persons == []

    def test_family_parses_nested_persons(self):
        """Test nested person validation"""
        family = Family.model_validate({"ID": 3, "Persons": [{"Age": 1}, {"age": 2}]})
        assert family.id == 3
        assert [p.age for p in family.persons] == [1, 2]


class TestReportModels:
    """Test report output models"""

    def test_family_summary_is_frozen(self):
        """Test that summaries cannot be modified"""
        summary = FamilySummary(family_id=1, number_of_family_members=0, average_age=0)
        with pytest.raises(ValidationError):
            summary.average_age = 5.0

    def test_family_summary_dumps_external_names(self):
        """Test alias based serialization"""
        summary = FamilySummary(FamilyID=1, NumberOfFamilyMembers=2, AverageAge=15.0)
        assert summary.model_dump(by_alias=True) == {
            "FamilyID": 1,
            "NumberOfFamilyMembers": 2,
            "AverageAge": 15.0
        }

    def test_family_summary_rejects_negative_count(self):
        """Test that member counts cannot be negative"""
        with pytest.raises(ValidationError):
            FamilySummary(family_id=1, number_of_family_members=-1, average_age=0)

    @pytest.mark.parametrize("letter", ["a", "1", "AB", "", "Ä"])
    def test_letter_occurrence_rejects_invalid_letters(self, letter):
        """Test that only a single uppercase A-Z letter is valid"""
        with pytest.raises(ValidationError):
            LetterOccurrence(letter=letter, number_of_occurrences=1)

    def test_letter_occurrence_rejects_zero_count(self):
        """Test that zero occurrences are not representable"""
        with pytest.raises(ValidationError):
            LetterOccurrence(letter="A", number_of_occurrences=0)


class TestConfigModel:
    """Test configuration model validation"""

    def test_config_defaults(self):
        """Test that JSON is the default format"""
        config = Config()
        assert config.output_format == "json"

    def test_config_normalizes_format(self):
        """Test that format names are case-insensitive"""
        assert Config(output_format=" CSV ").output_format == "csv"

    def test_config_rejects_unknown_format(self):
        """Test that unsupported formats are rejected"""
        with pytest.raises(ValidationError):
            Config(output_format="xml")
