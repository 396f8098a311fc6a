from studentdb.repositories.base import StudentRepository
from studentdb.repositories.orm import OrmRepository
from studentdb.repositories.query_builder import QueryBuilderRepository
from studentdb.repositories.raw_sql import RawSqlRepository

REPOSITORIES: dict[str, type[StudentRepository]] = {
    repo.variant: repo
    for repo in (RawSqlRepository, QueryBuilderRepository, OrmRepository)
}


def get_repository_class(variant: str) -> type[StudentRepository]:
    try:
        return REPOSITORIES[variant]
    except KeyError:
        raise ValueError(
            f"Unknown variant {variant!r}; expected one of {', '.join(REPOSITORIES)}"
        ) from None
