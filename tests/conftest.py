import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.main import app
from app.core.database import create_store_engine, get_db, init_db, locked_session
from app.competitions.controllers.install_controller import get_install_target
from app.competitions.models.competition_model import Competition
from app.country.models.country_model import Country

CSV_HEADER = "country,competition,country_flag,competition_logo,file"


@pytest.fixture
def store_engine(tmp_path):
    """Fresh file-backed store with the schema created"""
    engine = create_store_engine(f"sqlite:///{tmp_path / 'switcher_data.db'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(store_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=store_engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def make_source(tmp_path):
    """Write asset files and a CSV describing them; returns the CSV path"""

    def _make(rows, missing_payload_for=None, name="data.csv"):
        assets = tmp_path / "assets"
        assets.mkdir(exist_ok=True)
        lines = [CSV_HEADER]
        for country, competition in rows:
            slug = f"{country}_{competition}".replace(" ", "_")
            flag = assets / f"{country}.svg"
            flag.write_bytes(f"<svg>{country}</svg>".encode())
            logo = assets / f"{slug}.png"
            logo.write_bytes(f"logo {competition}".encode())
            payload = assets / f"{slug}.big"
            if competition == missing_payload_for:
                payload = assets / "does_not_exist.big"
            else:
                payload.write_bytes(f"BIGF {competition}".encode())
            lines.append(f"{country},{competition},{flag},{logo},{payload}")

        source = tmp_path / name
        source.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return source

    return _make


@pytest.fixture
def add_competition(db):
    """Insert a country/competition pair directly, bypassing seeding"""

    def _add(country_name, competition_name, file_blob=b"BIGF", logo_blob=b"logo"):
        country = db.query(Country).filter(Country.name == country_name).first()
        if country is None:
            country = Country(name=country_name, flag_blob=b"flag")
            db.add(country)
            db.flush()
        competition = Competition(
            name=competition_name, logo_blob=logo_blob, country_id=country.id, file_blob=file_blob
        )
        db.add(competition)
        db.commit()
        return competition.id

    return _add


@pytest.fixture
def install_target(tmp_path):
    return tmp_path / "game" / "overlays" / "Generic" / "overlay_9002.BIG"


@pytest.fixture
def client(session_factory, install_target):
    """API client bound to the temporary store; startup hooks are not run"""

    def _get_db():
        with locked_session(session_factory) as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_install_target] = lambda: str(install_target)
    yield TestClient(app)
    app.dependency_overrides.clear()
