from logging.config import fileConfig
from sqlalchemy import create_engine
from alembic import context

from reformed_chapter.config import get_settings

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)


def _database_url() -> str:
    settings = get_settings()
    if settings.database_url.strip():
        # Hosted Postgres hands out postgres:// but SQLAlchemy requires postgresql://
        url = settings.database_url.strip()
        if url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql://", 1)
        return url

    db = settings.db_config
    credentials = db["user"] or ""
    if db.get("password"):
        credentials += f":{db['password']}"
    return f"postgresql://{credentials}@{db['host']}:{db['port']}/{db['dbname']}"


# configparser treats "%" as interpolation
config.set_main_option("sqlalchemy.url", _database_url().replace("%", "%%"))

# Raw SQL migrations, no autogenerate metadata.
target_metadata = None


def run_migrations_offline():
    url = config.get_main_option("sqlalchemy.url")
    context.configure(url=url, target_metadata=target_metadata, literal_binds=True, compare_type=True)

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    connectable = create_engine(config.get_main_option("sqlalchemy.url"), future=True)

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata, compare_type=True)

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
