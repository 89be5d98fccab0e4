"""Named single-cell entities: pawns, projectiles, skills, characters, heroes, enemies, items and results."""