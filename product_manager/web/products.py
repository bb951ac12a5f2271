"""Server-rendered product pages built with Jinja2 templates.

These routes mirror the JSON API for people using a browser. Form posts
follow post/redirect/get: a successful write answers with a 303 back to
the index, a failed validation re-renders the form with its messages.
"""

from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from product_manager.dependencies import ProductServiceDep
from product_manager.models.product import Product
from product_manager.schemas import ProductCreate, ProductUpdate
from product_manager.validation import FIELD_LABELS, collect_errors

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

# Form inputs read from a submitted product form
FORM_FIELDS = ("id", "name", "description", "price", "quantity")

router = APIRouter(prefix="/products", tags=["views"], include_in_schema=False)


def format_currency(value: Any) -> str:
    """Format a price for display, e.g. 1234.5 -> "$1,234.50"."""
    try:
        return f"${Decimal(str(value)):,.2f}"
    except (InvalidOperation, ValueError):
        return str(value)


templates = Jinja2Templates(directory=TEMPLATES_DIR)
templates.env.filters["currency"] = format_currency
templates.env.globals["labels"] = FIELD_LABELS


async def read_product_form(request: Request) -> dict[str, str]:
    """Read the product fields from a form post.

    Blank inputs are dropped so they are reported as missing.
    """
    form = await request.form()
    data: dict[str, str] = {}
    for field in FORM_FIELDS:
        value = form.get(field)
        if isinstance(value, str) and value.strip():
            data[field] = value
    return data


def product_values(product: Product) -> dict[str, Any]:
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "price": product.price,
        "quantity": product.quantity,
    }


def render_not_found(request: Request, product_id: int) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "products/not_found.html",
        {"product_id": product_id},
        status_code=status.HTTP_404_NOT_FOUND,
    )


def render_form(
    request: Request,
    template: str,
    values: dict[str, Any],
    errors: dict[str, list[str]] | None = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        template,
        {"values": values, "errors": errors or {}},
        status_code=status_code,
    )


def redirect_to_index(request: Request) -> RedirectResponse:
    return RedirectResponse(
        str(request.url_for("product_index")),
        status_code=status.HTTP_303_SEE_OTHER,
    )


@router.get("", response_class=HTMLResponse, name="product_index")
async def index(request: Request, service: ProductServiceDep) -> HTMLResponse:
    products = await service.get_all()
    return templates.TemplateResponse(
        request, "products/index.html", {"products": products}
    )


@router.get(
    "/details/{product_id}", response_class=HTMLResponse, name="product_details"
)
async def details(
    product_id: int, request: Request, service: ProductServiceDep
) -> HTMLResponse:
    product = await service.get_by_id(product_id)
    if product is None:
        return render_not_found(request, product_id)

    return templates.TemplateResponse(
        request, "products/details.html", {"product": product}
    )


@router.get("/create", response_class=HTMLResponse, name="product_create_form")
async def create_form(request: Request) -> HTMLResponse:
    return render_form(request, "products/create.html", {})


@router.post("/create", response_class=HTMLResponse, name="product_create")
async def create(request: Request, service: ProductServiceDep) -> Response:
    """Validate a submitted product and store it."""
    form_data = await read_product_form(request)
    try:
        payload = ProductCreate.model_validate(form_data)
    except ValidationError as e:
        return render_form(
            request,
            "products/create.html",
            form_data,
            collect_errors(e.errors()),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    await service.add(Product(**payload.model_dump()))
    return redirect_to_index(request)


@router.get("/edit/{product_id}", response_class=HTMLResponse, name="product_edit_form")
async def edit_form(
    product_id: int, request: Request, service: ProductServiceDep
) -> HTMLResponse:
    product = await service.get_by_id(product_id)
    if product is None:
        return render_not_found(request, product_id)

    return render_form(request, "products/edit.html", product_values(product))


@router.post("/edit/{product_id}", response_class=HTMLResponse, name="product_edit")
async def edit(
    product_id: int, request: Request, service: ProductServiceDep
) -> Response:
    """Validate a submitted edit and apply it to the stored product.

    A form whose hidden ID disagrees with the URL is treated as not found.
    """
    form_data = await read_product_form(request)
    if form_data.get("id") != str(product_id):
        return render_not_found(request, product_id)

    try:
        payload = ProductUpdate.model_validate(form_data)
    except ValidationError as e:
        return render_form(
            request,
            "products/edit.html",
            form_data,
            collect_errors(e.errors()),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    if not await service.exists(product_id):
        return render_not_found(request, product_id)

    await service.update(Product(**payload.model_dump()))
    return redirect_to_index(request)


@router.get(
    "/delete/{product_id}", response_class=HTMLResponse, name="product_delete_form"
)
async def delete_form(
    product_id: int, request: Request, service: ProductServiceDep
) -> HTMLResponse:
    product = await service.get_by_id(product_id)
    if product is None:
        return render_not_found(request, product_id)

    return templates.TemplateResponse(
        request, "products/delete.html", {"product": product}
    )


@router.post("/delete/{product_id}", name="product_delete")
async def delete(
    product_id: int, request: Request, service: ProductServiceDep
) -> RedirectResponse:
    await service.delete(product_id)
    return redirect_to_index(request)
