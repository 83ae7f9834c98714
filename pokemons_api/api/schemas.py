from pydantic import BaseModel, ConfigDict


class Pokemon(BaseModel):
    """Column/value pairs of a pokemons row.

    The column set belongs to the database, so nothing is declared here;
    the store checks keys and values against the live table.
    """

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "name": "pikachu",
                "type": "electric",
                "color": "yellow",
                "habitat": "forest",
                "height": 4,
                "weight": 60,
                "description": "When several of these Pokemon gather, their electricity can build and cause lightning storms.",
            }
        },
    )
