"""Test case conversion helpers."""

from crabgen.codegen.utils import split_words, to_camel_case, to_snake_case


class TestSplitWords:
    def test_camel_boundaries(self):
        assert split_words('petId') == ['pet', 'Id']
        assert split_words('getPetById') == ['get', 'Pet', 'By', 'Id']

    def test_acronyms(self):
        assert split_words('HTTPRequest') == ['HTTP', 'Request']
        assert split_words('petID') == ['pet', 'ID']

    def test_separators(self):
        assert split_words('pet-store name') == ['pet', 'store', 'name']
        assert split_words('__dunder__') == ['dunder']
        assert split_words('') == []


class TestToSnakeCase:
    """Test to_snake_case function."""

    def test_camel_case(self):
        assert to_snake_case('addPet') == 'add_pet'
        assert to_snake_case('listPetsByTag') == 'list_pets_by_tag'

    def test_already_snake(self):
        assert to_snake_case('pet_id') == 'pet_id'

    def test_upper(self):
        assert to_snake_case('GET') == 'get'
        assert to_snake_case('HTTPRequest') == 'http_request'

    def test_digits_stay_attached(self):
        assert to_snake_case('pet2Owner') == 'pet2_owner'

    def test_accents_are_removed(self):
        assert to_snake_case('caféName') == 'cafe_name'


class TestToCamelCase:
    """Test to_camel_case function."""

    def test_snake_case(self):
        assert to_camel_case('pet_id') == 'PetId'
        assert to_camel_case('name') == 'Name'

    def test_lower_camel_case(self):
        assert to_camel_case('petId') == 'PetId'

    def test_acronyms_are_normalized(self):
        assert to_camel_case('HTTPRequest') == 'HttpRequest'
        assert to_camel_case('ID') == 'Id'
