import sys

import objmesh
from objmesh.utils import logger


if __name__ == "__main__":
    if len(sys.argv) < 2:
        logger.error("usage: python load_model.py model.obj [config.json]")
        sys.exit(2)

    cfg = objmesh.Config(sys.argv[2] if len(sys.argv) > 2 else None)
    cfg.apply_log_level()

    try:
        mesh = objmesh.load_obj(sys.argv[1], cfg)
    except objmesh.ObjError as exc:
        logger.error(f"Failed to load model: {exc}")
        sys.exit(1)

    vertex_data, index_data = mesh.to_buffers()
    logger.info(f"{mesh.vertex_count} vertices ({len(vertex_data)} bytes), "
                f"{mesh.triangle_count} triangles ({len(index_data)} bytes)")
