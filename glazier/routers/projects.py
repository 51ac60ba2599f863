from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from sqlalchemy.orm import Session
from typing import List
from datetime import datetime
from .. import models, schemas
from ..catalog.source import load_catalog
from ..cut_lists.registry import cut_list_for_unit
from ..database import get_db
from ..layout_engine import apply_update, new_unit
from ..pdf_generator import generate_project_pdf, generate_unit_summary
from ..pricing_engine import PricingEngine

router = APIRouter(prefix="/projects", tags=["projects"])


def generate_project_number(db: Session) -> str:
    """Next number after the highest one on file for the current year."""
    prefix = f"GZ-{datetime.utcnow().year}-"
    rows = db.query(models.Project.project_number).filter(
        models.Project.project_number.like(f"{prefix}%")
    ).all()
    last = max((int(number[len(prefix):]) for (number,) in rows), default=0)
    return f"{prefix}{str(last + 1).zfill(4)}"


def load_units(project: models.Project) -> list:
    """Stored dumps back into UnitConfig objects."""
    return [schemas.UnitConfig.model_validate(data) for data in (project.units_json or [])]


def save_units(project: models.Project, units: list):
    # Assign a new list so the JSON column is flagged dirty
    project.units_json = [unit.model_dump(mode="json") for unit in units]


def _get_project(project_id: int, db: Session) -> models.Project:
    project = db.query(models.Project).filter(models.Project.id == project_id).first()
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


def _check_index(units: list, index: int):
    if not 0 <= index < len(units):
        raise HTTPException(status_code=404, detail="Unit not found")


def project_out(project: models.Project) -> dict:
    return {
        "id": project.id,
        "project_number": project.project_number,
        "name": project.name,
        "client_name": project.client_name,
        "client_address": project.client_address,
        "client_phone": project.client_phone,
        "notes": project.notes,
        "material_family": project.material_family,
        "price_adjustment_pct": project.price_adjustment_pct or 0.0,
        "units": load_units(project),
        "created_at": project.created_at,
        "updated_at": project.updated_at,
    }


@router.get("/", response_model=List[schemas.Project])
def list_projects(db: Session = Depends(get_db)):
    projects = db.query(models.Project).order_by(models.Project.created_at.desc()).all()
    return [project_out(p) for p in projects]


@router.post("/", response_model=schemas.Project)
def create_project(project: schemas.ProjectCreate, db: Session = Depends(get_db)):
    db_project = models.Project(
        project_number=generate_project_number(db),
        name=project.name,
        client_name=project.client_name,
        client_address=project.client_address,
        client_phone=project.client_phone,
        notes=project.notes,
        material_family=project.material_family.value,
        price_adjustment_pct=project.price_adjustment_pct,
        units_json=[],
    )
    db.add(db_project)
    db.commit()
    db.refresh(db_project)
    return project_out(db_project)


@router.get("/{project_id}", response_model=schemas.Project)
def get_project(project_id: int, db: Session = Depends(get_db)):
    return project_out(_get_project(project_id, db))


@router.patch("/{project_id}", response_model=schemas.Project)
def update_project(project_id: int, update: schemas.ProjectUpdate, db: Session = Depends(get_db)):
    project = _get_project(project_id, db)
    for field, value in update.model_dump(exclude_unset=True).items():
        setattr(project, field, value)
    db.commit()
    db.refresh(project)
    return project_out(project)


@router.delete("/{project_id}")
def delete_project(project_id: int, db: Session = Depends(get_db)):
    project = _get_project(project_id, db)
    db.delete(project)
    db.commit()
    return {"ok": True}


@router.post("/{project_id}/units", response_model=schemas.Project)
def add_unit(project_id: int, request: schemas.NewUnitRequest, db: Session = Depends(get_db)):
    """Append a new unit with the project's material family."""
    project = _get_project(project_id, db)
    store = load_catalog(db, project.material_family)
    units = load_units(project)
    units.append(new_unit(project.material_family, request.overrides, store))
    save_units(project, units)
    db.commit()
    db.refresh(project)
    return project_out(project)


@router.put("/{project_id}/units/{index}", response_model=schemas.Project)
def update_unit(project_id: int, index: int, request: schemas.UnitEditRequest,
                db: Session = Depends(get_db)):
    project = _get_project(project_id, db)
    units = load_units(project)
    _check_index(units, index)
    store = load_catalog(db, project.material_family)
    units[index] = apply_update(units[index], request.updates, store)
    save_units(project, units)
    db.commit()
    db.refresh(project)
    return project_out(project)


@router.delete("/{project_id}/units/{index}", response_model=schemas.Project)
def remove_unit(project_id: int, index: int, db: Session = Depends(get_db)):
    project = _get_project(project_id, db)
    units = load_units(project)
    _check_index(units, index)
    del units[index]
    save_units(project, units)
    db.commit()
    db.refresh(project)
    return project_out(project)


def _build_quote(project: models.Project, db: Session) -> tuple:
    store = load_catalog(db, project.material_family)
    units = load_units(project)
    quote = PricingEngine(store).build_project_quote(units, project.price_adjustment_pct or 0.0)

    labels = {}
    for category in ("profile_lines", "glass_types", "frame_colors"):
        labels.update({entry.key: entry.label for entry in store.options(category)})
    details = [
        {
            "summary": generate_unit_summary(config, labels),
            "cut_list": cut_list_for_unit(config, store),
        }
        for config in units
    ]
    return quote, details


@router.get("/{project_id}/quote")
def get_project_quote(project_id: int, db: Session = Depends(get_db)):
    """Priced project: per-unit breakdowns, cut lists, adjustment and total."""
    project = _get_project(project_id, db)
    quote, details = _build_quote(project, db)
    for unit, detail in zip(quote["units"], details):
        unit.update(detail)
    return quote


@router.get("/{project_id}/pdf")
def download_pdf(project_id: int, db: Session = Depends(get_db)):
    """Returns: application/pdf"""
    project = _get_project(project_id, db)
    quote, details = _build_quote(project, db)

    project_data = {
        "project_number": project.project_number,
        "name": project.name,
        "client_name": project.client_name,
        "client_address": project.client_address,
        "notes": project.notes,
        "material_family": project.material_family,
        "created_at": project.created_at,
    }
    # Convert bytearray to bytes for Response compatibility
    pdf_bytes = bytes(generate_project_pdf(project_data, quote, details))

    filename = f"Quote-{project.project_number}.pdf"
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
        },
    )
