"""
Integration tests for DoctorRepository against in-memory SQLite.
"""

import pytest

from healthcare.core.exceptions import EntityNotFoundError
from healthcare.domain.entities import Doctor
from healthcare.repositories.doctor_repo import DoctorRepository


@pytest.fixture
def repo(db_session):
    return DoctorRepository(db_session)


@pytest.mark.integration
@pytest.mark.repositories
class TestDoctorRepositoryCrud:
    def test_create_assigns_id_and_round_trips(self, repo, make_doctor):
        created = repo.create(make_doctor())

        assert created.id
        assert repo.get_by_id(created.id) == created

    def test_create_ignores_supplied_id(self, repo, make_doctor):
        created = repo.create(make_doctor(id="client-chosen"))

        assert created.id != "client-chosen"
        assert repo.get_by_id("client-chosen") is None

    def test_ids_are_unique(self, repo, make_doctor):
        first = repo.create(make_doctor())
        second = repo.create(make_doctor())

        assert first.id != second.id
        assert len(repo.get_all()) == 2

    def test_get_by_id_missing_returns_none(self, repo):
        assert repo.get_by_id("missing") is None

    def test_update_overwrites_every_field(self, repo, make_doctor):
        created = repo.create(make_doctor())
        replacement = Doctor(
            name="Bob Jones",
            specialization="Neurology",
            years_of_experience=12,
            email="bob@clinic.com",
            phone_number="5559876543",
            id=created.id,
        )

        repo.update(replacement)

        assert repo.get_by_id(created.id) == replacement

    def test_update_missing_raises(self, repo, make_doctor):
        with pytest.raises(EntityNotFoundError):
            repo.update(make_doctor(id="missing"))

        assert repo.get_all() == []

    def test_update_without_id_raises_value_error(self, repo, make_doctor):
        with pytest.raises(ValueError):
            repo.update(make_doctor())

    def test_exists_and_delete(self, repo, make_doctor):
        created = repo.create(make_doctor())
        assert repo.exists(created.id)

        repo.delete_by_id(created.id)

        assert not repo.exists(created.id)
        assert repo.get_by_id(created.id) is None


@pytest.mark.integration
@pytest.mark.repositories
class TestDoctorRepositoryQueries:
    @pytest.fixture(autouse=True)
    def seed(self, repo, make_doctor):
        repo.create(make_doctor())
        repo.create(
            make_doctor(
                name="Carol White",
                specialization="Dermatology",
                years_of_experience=10,
                email="carol@clinic.com",
            )
        )

    @pytest.mark.parametrize("keyword", ["smith", "SMITH", "Ali", "e s"])
    def test_name_search_is_case_insensitive_substring(self, repo, keyword):
        names = [d.name for d in repo.find_by_name_containing_ignore_case(keyword)]

        assert names == ["Alice Smith"]

    def test_name_search_without_match(self, repo):
        assert repo.find_by_name_containing_ignore_case("bob") == []

    @pytest.mark.parametrize("keyword", ["%", "_", ".*"])
    def test_name_search_treats_wildcards_literally(self, repo, make_doctor, keyword):
        repo.create(make_doctor(name=f"Dr. {keyword} Literal"))

        names = [d.name for d in repo.find_by_name_containing_ignore_case(keyword)]

        assert names == [f"Dr. {keyword} Literal"]

    def test_experience_threshold_is_strict(self, repo):
        above_five = repo.find_by_years_of_experience_greater_than(5)
        above_four = repo.find_by_years_of_experience_greater_than(4)

        assert [d.name for d in above_five] == ["Carol White"]
        assert {d.name for d in above_four} == {"Alice Smith", "Carol White"}

    def test_specialization_is_case_insensitive_exact(self, repo):
        assert [
            d.name for d in repo.find_by_specialization_ignore_case("cardiology")
        ] == ["Alice Smith"]
        assert repo.find_by_specialization_ignore_case("cardio") == []

    def test_find_by_email(self, repo):
        assert repo.find_by_email("carol@clinic.com").name == "Carol White"
        assert repo.find_by_email("nobody@clinic.com") is None
