# ABOUTME: Material (.mtl) resolution for OBJ meshes
# ABOUTME: Finds the diffuse texture (map_Kd) next to the material file and decodes it

import logging
from pathlib import Path
from typing import Optional, Union

from .config import LoaderConfig
from .errors import FormatError, MeshParseError
from .image_sampler import ImageSampler
from .records import iter_records
from .utils.logging_utils import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


def material_path_for(mesh_path: Union[str, Path], material_name: str) -> Path:
    """Material files are looked up in the mesh file's directory."""
    return Path(mesh_path).parent / material_name


def resolve_material(mesh_path: Union[str, Path],
                     material_name: str,
                     config: Optional[LoaderConfig] = None) -> Optional[ImageSampler]:
    """
    Load the diffuse texture referenced by a material file.

    Args:
        mesh_path: Path of the mesh file that named the material
        material_name: Token following `mtllib`
        config: Loader options

    Returns:
        Sampler for the last `map_Kd` texture in the file, or None if there is none

    Raises:
        MeshIOError: If the material file can't be read
        FormatError: If a `map_Kd` record has no filename
        ImageDecodeError: If the texture can't be decoded
    """
    config = config or LoaderConfig()
    mtl_path = material_path_for(mesh_path, material_name)
    logger.debug("Reading material file: %s", mtl_path)

    sampler = None
    for line_number, line, parts in iter_records(mtl_path, config.encoding):
        if parts[0] != 'map_Kd':
            continue

        try:
            if len(parts) < 2:
                raise FormatError("map_Kd record has no texture filename")

            # Textures are relative to the material file, not the mesh
            texture_path = mtl_path.parent / parts[1]
            if sampler is not None:
                logger.debug("Replacing texture with later map_Kd: %s", texture_path)
            sampler = ImageSampler.from_file(texture_path, config)
        except MeshParseError as e:
            e.locate(mtl_path, line_number, line)
            raise

    if sampler is None:
        logger.warning("Material file %s has no map_Kd texture", mtl_path)
    else:
        logger.debug("Loaded texture (%dx%d) from %s", sampler.width, sampler.height, mtl_path)

    return sampler
