"""Test fixtures for crabgen tests.

This module provides sample API objects and records documents used across
the test suite.
"""

from crabgen.codegen.models import (
    ApiObject,
    HttpMethod,
    ObjectField,
    OpRequirement,
    Parameter,
    PathOps,
)

PET_ID = ObjectField('id', 'i64', required=True)
PET_NAME = ObjectField('name', 'String')


def standalone_pet() -> ApiObject:
    """Pet with a required ``id`` and optional ``name``, not bound to any path."""
    return ApiObject('Pet', fields=[PET_ID, PET_NAME])


def pet_with_two_gets() -> ApiObject:
    """Pet fetched through two paths, neither operation carrying an ID."""
    return ApiObject(
        'Pet',
        fields=[PET_ID, PET_NAME],
        paths={
            '/pets/{petId}': PathOps(operations={HttpMethod.GET: OpRequirement()}),
            '/pets': PathOps(operations={HttpMethod.GET: OpRequirement()}),
        },
    )


def pet_post() -> ApiObject:
    """Pet created through a POST with a required path parameter and body."""
    return ApiObject(
        'Pet',
        fields=[ObjectField('name', 'String', required=True)],
        paths={
            '/pets/{petId}': PathOps(
                operations={
                    HttpMethod.POST: OpRequirement(
                        operation_id='addPet', body_required=True
                    )
                },
                params=[Parameter('petId', 'i64', required=True)],
            )
        },
    )


def pet_list() -> ApiObject:
    """Pet listed through a GET with an optional query parameter."""
    return ApiObject(
        'Pet',
        fields=[PET_ID, PET_NAME],
        paths={
            '/pets': PathOps(
                operations={
                    'get': OpRequirement(params=[Parameter('limit', 'i32')]),
                }
            )
        },
    )


def health() -> ApiObject:
    """Object without fields bound to a GET that needs nothing."""
    return ApiObject(
        'Health', paths={'/health': PathOps(operations={'get': OpRequirement()})}
    )


PETSTORE_RECORDS = {
    'objects': [
        {
            'name': 'Pet',
            'fields': [
                {'name': 'id', 'type': 'i64', 'required': True},
                {'name': 'name', 'type': 'String'},
                {
                    'name': 'parent',
                    'type': 'Pet',
                    'rename': 'parentPet',
                    'boxed': True,
                },
            ],
            'paths': {
                '/pets': {
                    'operations': {
                        'get': {
                            'operation_id': 'listPets',
                            'params': [{'name': 'limit', 'type': 'i32'}],
                        },
                        'post': {'operation_id': 'addPet', 'body_required': True},
                    }
                },
                '/pets/{petId}': {
                    'params': [{'name': 'petId', 'type': 'i64', 'required': True}],
                    'operations': {'get': {'operationId': 'getPet'}},
                },
            },
        },
        {
            'name': 'Category',
            'fields': [{'name': 'title', 'type': 'String', 'required': True}],
        },
    ]
}

PETSTORE_RECORDS_YAML = """
objects:
  - name: Pet
    fields:
      - {name: id, type: i64, required: true}
      - {name: name, type: String}
    paths:
      "/pets/{petId}":
        params:
          - {name: petId, type: i64, required: true}
        operations:
          get: {}
          PUT: {operation_id: updatePet, body_required: true}
"""
