# repositories/project_repository.py
from typing import List

from sqlmodel import col, select

from taskboard.models.permissions import FULL_PERMISSION, ObjectPerms, ObjectType, default_permission_columns
from taskboard.models.project import Project, ProjectCreate, ProjectUpdate
from taskboard.repositories.base import BaseRepository
from taskboard.repositories.cascade import delete_project
from taskboard.utils import utc_now


class ProjectRepository(BaseRepository):
    def create(self, owner_id: int, project: ProjectCreate) -> int:
        """
        Create a new project and grant full permissions to its owner.
        """
        with self.session() as session:
            db_project = Project(
                owner_id=owner_id,
                title=project.title,
                description=project.description,
                **default_permission_columns(project.default_permissions),
            )
            session.add(db_project)
            session.flush()

            session.add(
                ObjectPerms(
                    object_id=db_project.id,
                    user_id=owner_id,
                    object_type=int(ObjectType.PROJECT),
                    **FULL_PERMISSION.model_dump(),
                )
            )
            session.commit()
            session.refresh(db_project)
            return db_project.id

    def get_all(self, user_id: int) -> List[Project]:
        """
        Get all projects the user holds a grant on.
        """
        with self.session() as session:
            accessible_ids = select(ObjectPerms.object_id).where(
                ObjectPerms.user_id == user_id,
                ObjectPerms.object_type == int(ObjectType.PROJECT),
            )
            statement = (
                select(Project)
                .where(col(Project.id).in_(accessible_ids))
                .order_by(Project.id)
            )
            return list(session.exec(statement).all())

    def get_by_id(self, project_id: int) -> Project:
        with self.session() as session:
            return self.get_or_raise(session, Project, project_id)

    def update(self, project_id: int, project: ProjectUpdate) -> None:
        with self.session() as session:
            db_project = self.get_or_raise(session, Project, project_id)
            if project.title is not None:
                db_project.title = project.title
            if project.description is not None:
                db_project.description = project.description
            if project.default_permissions is not None:
                for key, value in default_permission_columns(project.default_permissions).items():
                    setattr(db_project, key, value)
            db_project.updated_at = utc_now()
            session.add(db_project)
            session.commit()

    def delete(self, project_id: int) -> None:
        """
        Delete a project with its boards, lists, tasks, labels and grants.
        """
        with self.session() as session:
            db_project = self.get_or_raise(session, Project, project_id)
            delete_project(session, project_id)
            session.delete(db_project)
            session.commit()
