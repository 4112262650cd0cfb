from fastapi import APIRouter, Depends, Query, Path, Body
from sqlalchemy.orm import Session
from typing import Any, List, Optional
import inflect
from app.core.messages import Translator, get_translator
from app.schemas.generator import generate_model_schemas
from app.schemas.response import ErrorEnvelope, ResponseEnvelope
from app.routers.generic_crud import CRUDBase
from app.routers.responses import send_error, send_response

# Initialize inflect for proper pluralization
inflector = inflect.engine()

# Largest value a 64-bit INTEGER column can hold
MAX_ID = 2**63 - 1

ALL_ROUTES = ['list', 'get', 'create', 'update', 'delete']


class RouteGenerator:
    def __init__(
        self,
        model,
        crud_class: CRUDBase,
        db_dependency,
        translator_dependency = get_translator,
        prefix: str = None,
        tag_prefix: str = None
    ):
        self.model = model
        self.crud = crud_class
        self.get_db = db_dependency
        self.get_translator = translator_dependency

        self.model_name = model.__name__
        # Catalog key for display names, e.g. "rooms"
        self.model_key = model.__tablename__
        self.model_plural = inflector.plural(self.model_name.lower())
        self.tag_name = tag_prefix or self.model_plural.title()
        self.prefix = prefix if prefix is not None else f"/{self.model_plural}"

        # Auto-generate schemas
        self.schemas = generate_model_schemas(model)

    def transform(self, db_obj):
        """Map an ORM entity to its public shape"""
        return self.schemas['response'].model_validate(db_obj)

    def message(self, translator: Translator, key: str, plural: bool = False) -> str:
        return translator.model_message(key, self.model_key, plural=plural, fallback=self.model_name)

    def generate_router(
        self,
        include_routes: List[str] = None,
        exclude_routes: List[str] = None
    ) -> APIRouter:
        """Generate router with configurable routes"""

        include_routes = include_routes or ALL_ROUTES
        exclude_routes = exclude_routes or []
        active_routes = [route for route in include_routes if route not in exclude_routes]

        router = APIRouter(
            prefix=self.prefix,
            tags=[self.tag_name]
        )

        ResponseSchema = self.schemas['response']
        CreateSchema = self.schemas['create']
        UpdateSchema = self.schemas['update']

        not_found_doc = {404: {"model": ErrorEnvelope, "description": f"{self.model_name} not found"}}

        db_dep = Depends(self.get_db)
        translator_dep = Depends(self.get_translator)

        # LIST endpoint
        if 'list' in active_routes:
            @router.get(
                "",
                response_model=ResponseEnvelope[List[ResponseSchema]],
                summary=f"Get a listing of the {self.model_plural.title()}",
                description=f"Get all {self.model_plural.title()}"
            )
            def list_items(
                skip: Optional[int] = Query(None, ge=0, le=MAX_ID, description="Number of records to skip"),
                limit: Optional[int] = Query(None, ge=0, le=MAX_ID, description="Max records to return; 0 or absent means no limit"),
                db: Session = db_dep,
                translator: Translator = translator_dep
            ):
                items = self.crud.get_multi(db, skip=skip, limit=limit)
                return send_response(
                    [self.transform(item) for item in items],
                    self.message(translator, 'retrieved', plural=True)
                )

        # CREATE endpoint
        if 'create' in active_routes:
            @router.post(
                "",
                response_model=ResponseEnvelope[ResponseSchema],
                summary=f"Store a newly created {self.model_name} in storage",
                description=f"Store {self.model_name}"
            )
            def create_item(
                item: CreateSchema = Body(..., description=f"{self.model_name} that should be stored"),
                db: Session = db_dep,
                translator: Translator = translator_dep
            ):
                db_item = self.crud.create(db=db, obj_in=item)
                return send_response(self.transform(db_item), self.message(translator, 'saved'))

        # GET single item
        if 'get' in active_routes:
            @router.get(
                "/{item_id}",
                response_model=ResponseEnvelope[ResponseSchema],
                responses=not_found_doc,
                summary=f"Display the specified {self.model_name}",
                description=f"Get {self.model_name}"
            )
            def get_item(
                item_id: int = Path(..., le=MAX_ID, description=f"id of {self.model_name}"),
                db: Session = db_dep,
                translator: Translator = translator_dep
            ):
                db_item = self.crud.get(db, id=item_id)
                if db_item is None:
                    return send_error(self.message(translator, 'not_found'))
                return send_response(self.transform(db_item), self.message(translator, 'retrieved'))

        # UPDATE endpoint, registered for both PUT and PATCH
        if 'update' in active_routes:
            def update_item(
                item_id: int = Path(..., le=MAX_ID, description=f"id of {self.model_name}"),
                item: UpdateSchema = Body(..., description=f"{self.model_name} that should be updated"),
                db: Session = db_dep,
                translator: Translator = translator_dep
            ):
                db_item = self.crud.get(db, id=item_id)
                if db_item is None:
                    return send_error(self.message(translator, 'not_found'))
                db_item = self.crud.update(db=db, db_obj=db_item, obj_in=item)
                return send_response(self.transform(db_item), self.message(translator, 'updated'))

            for method in ("PUT", "PATCH"):
                router.add_api_route(
                    "/{item_id}",
                    update_item,
                    methods=[method],
                    name=f"update_item_{method.lower()}",
                    response_model=ResponseEnvelope[ResponseSchema],
                    responses=not_found_doc,
                    summary=f"Update the specified {self.model_name} in storage",
                    description=f"Update {self.model_name}"
                )

        # DELETE endpoint
        if 'delete' in active_routes:
            @router.delete(
                "/{item_id}",
                response_model=ResponseEnvelope[Any],
                responses=not_found_doc,
                summary=f"Remove the specified {self.model_name} from storage",
                description=f"Delete {self.model_name}"
            )
            def delete_item(
                item_id: int = Path(..., le=MAX_ID, description=f"id of {self.model_name}"),
                db: Session = db_dep,
                translator: Translator = translator_dep
            ):
                db_item = self.crud.get(db, id=item_id)
                if db_item is None:
                    return send_error(self.message(translator, 'not_found'))
                self.crud.delete(db=db, db_obj=db_item)
                return send_response(item_id, self.message(translator, 'deleted'))

        return router

# Usage helper function
def create_crud_router(
    model,
    db_dependency,
    crud: CRUDBase = None,
    translator_dependency = get_translator,
    include_routes: List[str] = None,
    exclude_routes: List[str] = None,
    prefix: str = None,
    tag_prefix: str = None
) -> APIRouter:
    """Helper function to quickly create a CRUD router for a model"""

    generator = RouteGenerator(
        model=model,
        crud_class=crud or CRUDBase(model),
        db_dependency=db_dependency,
        translator_dependency=translator_dependency,
        prefix=prefix,
        tag_prefix=tag_prefix
    )

    return generator.generate_router(
        include_routes=include_routes,
        exclude_routes=exclude_routes
    )
