from pydantic import BaseModel, Field, model_validator


class CellSchema(BaseModel):
    x: int = Field(..., description="Cube coordinate x")
    y: int = Field(..., description="Cube coordinate y")
    z: int = Field(..., description="Cube coordinate z")
    is_blocked: bool = Field(default=False, description="Whether movement into the cell is impossible")
    is_opaque: bool = Field(default=False, description="Whether the cell blocks line of sight")
    cost: float = Field(default=0.0, ge=0.0, description="Extra movement cost for entering the cell")

    @model_validator(mode="after")
    def check_cube_invariant(self) -> "CellSchema":
        if self.x + self.y + self.z != 0:
            msg = f"Sum of coordinate values must be zero, got ({self.x}, {self.y}, {self.z})"
            raise ValueError(msg)
        return self


class GridSchema(BaseModel):
    cells: list[CellSchema] = Field(default_factory=list, description="Every cell of the grid")

    @model_validator(mode="after")
    def check_unique_cells(self) -> "GridSchema":
        seen: set[tuple[int, int, int]] = set()
        for cell in self.cells:
            key = (cell.x, cell.y, cell.z)
            if key in seen:
                msg = f"Duplicate cell at {key}"
                raise ValueError(msg)
            seen.add(key)
        return self
