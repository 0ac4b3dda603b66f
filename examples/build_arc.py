import io

import dxfcodec


def main() -> None:
    schema = dxfcodec.schema_for("ARC")
    arc = dxfcodec.new_entity("ARC")
    arc.set("layer", "CONSTRUCTION")
    arc.set_point("center", (10.0, 5.0, 0.0))
    arc.set("radius", 2.5)
    arc.set("end_angle", 90.0)

    sink = io.StringIO()
    dxfcodec.encode_entity(arc, schema, dxfcodec.TagWriter(sink), "R12")
    print(sink.getvalue(), end="")

    decoded = dxfcodec.decode_entity(schema, dxfcodec.TagReader.from_string(sink.getvalue()), "R12")
    print("radius:", decoded.dxf["radius"], "end_angle:", decoded.dxf["end_angle"])


if __name__ == "__main__":
    main()
