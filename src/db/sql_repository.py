"""Implementation of (Game)Repository using SQLAlchemy"""

from uuid import UUID, uuid4

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from src.core.exceptions import StaleGameError
from src.core.models import GameModel
from src.db.schema import DBGame


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        game_db = self._fetch_game(game_id)
        if game_db:
            return self._to_model(game_db)
        return None

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""

        new_id = uuid4()
        game_db = DBGame(
            id=new_id,
            layout=list(game.layout),
            turn=game.turn,
        )
        self.db.add(game_db)
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db), new_id

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """
        Replace the stored snapshot of an existing record, bumping its version.

        Compare-and-set on `version`: the UPDATE only matches while the record still has the
        version `game` was read at. Raises StaleGameError when someone else wrote in between.
        """
        result = self.db.execute(
            update(DBGame)
            .where(DBGame.id == game_id, DBGame.version == game.version)
            .values(layout=list(game.layout), turn=game.turn, version=game.version + 1)
        )
        if result.rowcount == 0:
            self.db.rollback()
            if self._fetch_game(game_id) is None:
                return None
            raise StaleGameError(
                f"Game {game_id} was changed since version {game.version} was read."
            )
        self.db.commit()
        return self.get_game(game_id)

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record."""
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        game_model = self._to_model(game_db)
        self.db.delete(game_db)
        self.db.commit()
        return game_model

    def _fetch_game(self, game_id: UUID) -> DBGame | None:
        query = select(DBGame).where(DBGame.id == game_id)
        return self.db.scalar(query)

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameModel(
            layout=list(game_db.layout),
            turn=game_db.turn,
            version=game_db.version,
        )
