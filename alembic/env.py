from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

from laliga_tracker.config.settings import AppConfig
from laliga_tracker.infra.models import Base

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# LALIGA_DATABASE_URL wins over whatever is in alembic.ini
app_config = AppConfig.from_env()
config.set_main_option("sqlalchemy.url", app_config.database_url)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    app_config.ensure_directories_exist()
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        # batch mode so ALTERs work on SQLite
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=True,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
