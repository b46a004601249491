from logging.config import fileConfig

from alembic import context

from content_service.models.base import Base, engine
import content_service.models.company_story  # noqa: F401
import content_service.models.contact_submission  # noqa: F401
import content_service.models.content_block  # noqa: F401
import content_service.models.delivery_settings  # noqa: F401
import content_service.models.hero_slide  # noqa: F401
import content_service.models.inquiry_type  # noqa: F401
import content_service.models.product  # noqa: F401
import content_service.models.product_category  # noqa: F401
import content_service.models.site_setting  # noqa: F401
import content_service.models.statistic  # noqa: F401
import content_service.models.testimonial  # noqa: F401
import content_service.models.usp_item  # noqa: F401

config = context.config

# Programmatic runs (startup, seeder) pass no ini file and keep the app's logging setup
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def run_migrations_offline():
    context.configure(
        url=str(engine.url),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=engine.dialect.name == "sqlite",
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    with engine.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=connection.dialect.name == "sqlite",
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
