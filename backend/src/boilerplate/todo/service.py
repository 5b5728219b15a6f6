"""Todo resource wiring: descriptor, repository, service."""

from boilerplate.crud.repository import Repository
from boilerplate.crud.resource import Resource
from boilerplate.crud.service import ResourceService
from boilerplate.crud.validators import validate_create_options, validate_update_options
from boilerplate.todo.models import Todo

todo_resource = Resource(
    name="todo",
    model=Todo,
    validate_create=validate_create_options,
    validate_update=validate_update_options,
    filter_fields=("title",),
    update_fields=("title",),
    order_fields=("title", "created_at", "updated_at"),
)

todo_repository = Repository(todo_resource)
todo_service = ResourceService(todo_repository)
