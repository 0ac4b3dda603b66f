"""Field tables for the supported entity and symbol-table record types.

Defaults follow what a reference application writes: layer "0", linetype
BYLAYER, color 256 (BYLAYER), unit scale factors and a +Z extrusion.
"""

from __future__ import annotations

from math import tau

from .schema import EntitySchema, LayoutItem, field, marker, point
from .tags import ValueKind
from .versions import (
    EXTRUSION_MIN,
    LEGACY_ELEVATION_MAX,
    REACTORS_MIN,
    DXFVersion as V,
)

COLOR_BYLAYER = 256
DEFAULT_LAYER = "0"
DEFAULT_LINETYPE = "BYLAYER"
DEFAULT_TEXTSTYLE = "STANDARD"

REACTORS_GROUP = "{ACAD_REACTORS"
XDICTIONARY_GROUP = "{ACAD_XDICTIONARY"


def _ownership(handle_code: int = 5) -> list[LayoutItem]:
    return [
        field(handle_code, "handle", kind=ValueKind.HANDLE),
        field(330, "reactors", repeated=True, min_version=REACTORS_MIN, app_group=REACTORS_GROUP),
        field(360, "xdictionary", "", min_version=REACTORS_MIN, app_group=XDICTIONARY_GROUP),
        field(330, "owner", "", min_version=V.AC1015),
    ]


def entity_header(*, legacy_elevation: bool = True) -> list[LayoutItem]:
    items = _ownership()
    items += [
        marker("AcDbEntity"),
        field(67, "paperspace", 0),
        field(8, "layer", DEFAULT_LAYER, identifier=True),
        field(6, "linetype", DEFAULT_LINETYPE),
    ]
    if legacy_elevation:
        items.append(field(38, "elevation", 0.0, max_version=LEGACY_ELEVATION_MAX))
    items += [
        field(62, "color", COLOR_BYLAYER),
        field(48, "linetype_scale", 1.0, min_version=V.AC1012),
        field(60, "visibility", 0, min_version=V.AC1012),
    ]
    return items


def symbol_header() -> list[LayoutItem]:
    return _ownership() + [marker("AcDbSymbolTableRecord")]


def _thickness() -> LayoutItem:
    return field(39, "thickness", 0.0)


def _extrusion() -> LayoutItem:
    return point(210, "extrusion", (0.0, 0.0, 1.0), min_version=EXTRUSION_MIN)


def _entity(dxftype: str, *body: LayoutItem, legacy_elevation: bool = True) -> EntitySchema:
    return EntitySchema(dxftype, entity_header(legacy_elevation=legacy_elevation), body)


def _symbol(dxftype: str, *body: LayoutItem) -> EntitySchema:
    return EntitySchema(dxftype, symbol_header(), body)


def _text_body() -> list[LayoutItem]:
    return [
        marker("AcDbText"),
        _thickness(),
        point(10, "insert", required=True),
        field(40, "height", 1.0, required=True),
        field(1, "text", "", required=True),
        field(50, "rotation", 0.0),
        field(41, "width", 1.0),
        field(51, "oblique", 0.0),
        field(7, "style", DEFAULT_TEXTSTYLE),
        field(71, "text_generation_flag", 0),
        field(72, "halign", 0),
        point(11, "align_point"),
        _extrusion(),
    ]


def _modeler_body() -> list[LayoutItem]:
    return [
        marker("AcDbModelerGeometry"),
        field(70, "version", 1, min_version=V.AC1012, required=True),
        field(1, "proprietary_data", repeated=True),
        field(3, "additional_proprietary_data", repeated=True),
    ]


def _spline_body() -> list[LayoutItem]:
    # Knots and weights are written as blocks; control and fit points as x/y/z rows.
    return [
        field(70, "flags", 0, required=True),
        field(71, "degree", 3, required=True),
        field(72, "knot_count", 0, required=True, count_of="knots"),
        field(73, "control_point_count", 0, required=True, count_of="control_point_x"),
        field(74, "fit_point_count", 0, required=True, count_of="fit_point_x"),
        field(42, "knot_tolerance", 1e-10),
        field(43, "control_point_tolerance", 1e-10),
        field(44, "fit_tolerance", 1e-10),
        point(12, "start_tangent"),
        point(13, "end_tangent"),
        field(40, "knots", repeated=True),
        field(41, "weights", repeated=True),
        point(10, "control_point", repeated=True),
        point(11, "fit_point", repeated=True),
    ]


_VERTEX_MARKERS = (
    "AcDb2dVertex",
    "AcDb3dPolylineVertex",
    "AcDbPolygonMeshVertex",
    "AcDbPolyFaceMeshVertex",
    "AcDbFaceRecord",
)
_DIMENSION_MARKERS = (
    "AcDbAlignedDimension",
    "AcDbRadialDimension",
    "AcDbDiametricDimension",
    "AcDb3PointAngularDimension",
    "AcDb2LineAngularDimension",
    "AcDbOrdinateDimension",
)


def build_schemas() -> list[EntitySchema]:
    schemas = [
        _entity(
            "LINE",
            marker("AcDbLine"),
            _thickness(),
            point(10, "start", required=True),
            point(11, "end", required=True),
            _extrusion(),
        ),
        _entity(
            "3DLINE",
            marker("AcDbLine"),
            _thickness(),
            point(10, "start", required=True),
            point(11, "end", required=True),
            _extrusion(),
        ),
        _entity(
            "POINT",
            marker("AcDbPoint"),
            _thickness(),
            point(10, "location", required=True),
            _extrusion(),
            field(50, "angle", 0.0, min_version=V.AC1012),
        ),
        _entity(
            "CIRCLE",
            marker("AcDbCircle"),
            _thickness(),
            point(10, "center", required=True),
            field(40, "radius", 0.0, required=True),
            _extrusion(),
        ),
        _entity(
            "ARC",
            marker("AcDbCircle"),
            _thickness(),
            point(10, "center", required=True),
            field(40, "radius", 0.0, required=True),
            _extrusion(),
            marker("AcDbArc"),
            field(50, "start_angle", 0.0, required=True),
            field(51, "end_angle", 360.0, required=True),
        ),
        _entity(
            "ELLIPSE",
            marker("AcDbEllipse"),
            point(10, "center", required=True),
            point(11, "major_axis", (1.0, 0.0, 0.0), required=True),
            _extrusion(),
            field(40, "ratio", 1.0, required=True),
            field(41, "start_param", 0.0, required=True),
            field(42, "end_param", tau, required=True),
        ),
        _entity(
            "SOLID",
            marker("AcDbTrace"),
            _thickness(),
            point(10, "vtx0", required=True),
            point(11, "vtx1", required=True),
            point(12, "vtx2", required=True),
            point(13, "vtx3", required=True),
            _extrusion(),
        ),
        _entity(
            "TRACE",
            marker("AcDbTrace"),
            _thickness(),
            point(10, "vtx0", required=True),
            point(11, "vtx1", required=True),
            point(12, "vtx2", required=True),
            point(13, "vtx3", required=True),
            _extrusion(),
        ),
        _entity(
            "3DFACE",
            marker("AcDbFace"),
            point(10, "vtx0", required=True),
            point(11, "vtx1", required=True),
            point(12, "vtx2", required=True),
            point(13, "vtx3", required=True),
            field(70, "invisible_edges", 0),
        ),
        _entity(
            "RAY",
            marker("AcDbRay"),
            point(10, "start", required=True),
            point(11, "unit_vector", (1.0, 0.0, 0.0), required=True),
        ),
        _entity(
            "XLINE",
            marker("AcDbXline"),
            point(10, "start", required=True),
            point(11, "unit_vector", (1.0, 0.0, 0.0), required=True),
        ),
        _entity(
            "TEXT",
            *_text_body(),
            marker("AcDbText"),
            field(73, "valign", 0),
        ),
        _entity(
            "ATTDEF",
            *_text_body(),
            marker("AcDbAttributeDefinition"),
            field(3, "prompt", "", required=True),
            field(2, "tag", "", identifier=True),
            field(70, "flags", 0),
            field(73, "field_length", 0),
            field(74, "valign", 0),
        ),
        _entity(
            "ATTRIB",
            *_text_body(),
            marker("AcDbAttribute"),
            field(2, "tag", "", identifier=True),
            field(70, "flags", 0),
            field(73, "field_length", 0),
            field(74, "valign", 0),
        ),
        _entity(
            "SHAPE",
            marker("AcDbShape"),
            _thickness(),
            point(10, "insert", required=True),
            field(40, "size", 1.0, required=True),
            field(2, "name", "", identifier=True),
            field(50, "rotation", 0.0),
            field(41, "xscale", 1.0),
            field(51, "oblique", 0.0),
            _extrusion(),
        ),
        _entity(
            "INSERT",
            marker("AcDbBlockReference"),
            field(66, "attributes_follow", 0),
            field(2, "name", "", identifier=True),
            point(10, "insert", required=True),
            field(41, "xscale", 1.0),
            field(42, "yscale", 1.0),
            field(43, "zscale", 1.0),
            field(50, "rotation", 0.0),
            field(70, "column_count", 1),
            field(71, "row_count", 1),
            field(44, "column_spacing", 0.0),
            field(45, "row_spacing", 0.0),
            _extrusion(),
        ),
        _entity(
            "BLOCK",
            marker("AcDbBlockBegin"),
            field(2, "name", "", identifier=True),
            field(70, "flags", 0),
            point(10, "base_point", required=True),
            field(3, "name2", ""),
            field(1, "xref_path", ""),
            field(4, "description", "", min_version=V.AC1018),
        ),
        _entity("ENDBLK", marker("AcDbBlockEnd")),
        _entity("SEQEND"),
        _entity(
            "POLYLINE",
            marker("AcDb2dPolyline", aliases=("AcDb3dPolyline", "AcDbPolygonMesh", "AcDbPolyFaceMesh")),
            field(66, "vertices_follow", 1, required=True),
            point(10, "elevation_point", required=True),
            _thickness(),
            field(70, "flags", 0),
            field(40, "default_start_width", 0.0),
            field(41, "default_end_width", 0.0),
            field(71, "m_count", 0),
            field(72, "n_count", 0),
            field(73, "m_smooth_density", 0),
            field(74, "n_smooth_density", 0),
            field(75, "smooth_type", 0),
            _extrusion(),
        ),
        _entity(
            "VERTEX",
            marker("AcDbVertex"),
            marker(_VERTEX_MARKERS[0], aliases=_VERTEX_MARKERS[1:]),
            point(10, "location", required=True),
            field(40, "start_width", 0.0),
            field(41, "end_width", 0.0),
            field(42, "bulge", 0.0),
            field(70, "flags", 0),
            field(50, "tangent", 0.0),
            field(71, "vtx0", 0),
            field(72, "vtx1", 0),
            field(73, "vtx2", 0),
            field(74, "vtx3", 0),
        ),
        _entity(
            "LWPOLYLINE",
            marker("AcDbPolyline"),
            field(90, "count", 0, required=True, count_of="vertex_x"),
            field(70, "flags", 0),
            field(43, "const_width", 0.0),
            field(38, "elevation", 0.0),
            _thickness(),
            point(10, "vertex", (0.0, 0.0), repeated=True, group="vertex"),
            field(40, "start_width", 0.0, repeated=True, group="vertex"),
            field(41, "end_width", 0.0, repeated=True, group="vertex"),
            field(42, "bulge", 0.0, repeated=True, group="vertex"),
            _extrusion(),
            legacy_elevation=False,
        ),
        _entity(
            "MTEXT",
            marker("AcDbMText"),
            point(10, "insert", required=True),
            field(40, "char_height", 1.0, required=True),
            field(41, "width", 0.0),
            field(71, "attachment_point", 1),
            field(72, "flow_direction", 1),
            field(3, "text_chunks", repeated=True),
            field(1, "text", "", required=True),
            field(7, "style", DEFAULT_TEXTSTYLE),
            _extrusion(),
            point(11, "text_direction", (1.0, 0.0, 0.0)),
            field(42, "rect_width", 0.0),
            field(43, "rect_height", 0.0),
            field(50, "rotation", 0.0),
            field(73, "line_spacing_style", 1),
            field(44, "line_spacing_factor", 1.0),
            field(90, "bg_fill", 0, min_version=V.AC1018),
            field(63, "bg_fill_color", COLOR_BYLAYER, min_version=V.AC1018),
            field(45, "box_fill_scale", 1.5, min_version=V.AC1018),
        ),
        _entity(
            "DIMENSION",
            marker("AcDbDimension"),
            field(2, "geometry", ""),
            point(10, "defpoint", required=True),
            point(11, "text_midpoint", required=True),
            point(12, "insert"),
            field(70, "dimtype", 0, required=True),
            field(1, "text", ""),
            field(53, "text_rotation", 0.0),
            field(51, "horizontal_direction", 0.0),
            _extrusion(),
            field(3, "dimstyle", DEFAULT_TEXTSTYLE),
            marker(_DIMENSION_MARKERS[0], aliases=_DIMENSION_MARKERS[1:]),
            point(13, "defpoint2"),
            point(14, "defpoint3"),
            point(15, "defpoint4"),
            point(16, "defpoint5"),
            field(40, "leader_length", 0.0),
            field(50, "angle", 0.0),
            field(52, "oblique_angle", 0.0),
            # Linear dimensions follow AcDbAlignedDimension with this second marker.
            marker("AcDbRotatedDimension", optional=True),
        ),
        _entity(
            "VIEWPORT",
            marker("AcDbViewport"),
            point(10, "center", required=True),
            field(40, "width", 1.0, required=True),
            field(41, "height", 1.0, required=True),
            field(68, "status", 0, required=True),
            field(69, "id", 1, required=True),
            point(12, "view_center", (0.0, 0.0), min_version=V.AC1012),
            point(13, "snap_base", (0.0, 0.0), min_version=V.AC1012),
            point(14, "snap_spacing", (10.0, 10.0), min_version=V.AC1012),
            point(15, "grid_spacing", (10.0, 10.0), min_version=V.AC1012),
            point(16, "view_direction", (0.0, 0.0, 1.0), min_version=V.AC1012),
            point(17, "view_target", min_version=V.AC1012),
            field(42, "lens_length", 50.0, min_version=V.AC1012),
            field(43, "front_clip", 0.0, min_version=V.AC1012),
            field(44, "back_clip", 0.0, min_version=V.AC1012),
            field(45, "view_height", 1.0, min_version=V.AC1012),
            field(50, "snap_angle", 0.0, min_version=V.AC1012),
            field(51, "view_twist", 0.0, min_version=V.AC1012),
            field(72, "circle_zoom", 100, min_version=V.AC1012),
            field(90, "flags", 0, min_version=V.AC1015),
            field(281, "render_mode", 0, min_version=V.AC1015),
        ),
        _entity(
            "OLEFRAME",
            marker("AcDbOleFrame"),
            field(70, "version", 2, required=True),
            field(90, "length", 0, required=True),
            field(310, "binary_data", repeated=True),
            field(1, "end_marker", "OLE"),
        ),
        _entity("BODY", *_modeler_body()),
        _entity("REGION", *_modeler_body()),
        _entity(
            "3DSOLID",
            *_modeler_body(),
            marker("AcDb3dSolid", min_version=V.AC1021),
            field(350, "history", "", min_version=V.AC1021),
        ),
        _entity(
            "SPLINE",
            marker("AcDbSpline"),
            point(210, "normal", (0.0, 0.0, 1.0)),
            *_spline_body(),
        ),
        _entity(
            "HELIX",
            marker("AcDbSpline"),
            *_spline_body(),
            marker("AcDbHelix"),
            field(90, "major_release", 29, required=True),
            field(91, "maintenance_release", 63, required=True),
            point(10, "axis_base", required=True),
            point(11, "start", (1.0, 0.0, 0.0), required=True),
            point(12, "axis_vector", (0.0, 0.0, 1.0), required=True),
            field(40, "radius", 1.0, required=True),
            field(41, "turns", 1.0, required=True),
            field(42, "turn_height", 1.0, required=True),
            field(290, "handedness", True),
            field(280, "constraint", 1),
        ),
        _entity(
            "LEADER",
            marker("AcDbLeader"),
            field(3, "dimstyle", DEFAULT_TEXTSTYLE, required=True),
            field(71, "arrowhead", 1),
            field(72, "path_type", 0),
            field(73, "annotation_type", 3),
            field(74, "hookline_direction", 0),
            field(75, "hookline", 0),
            field(40, "text_height", 0.0),
            field(41, "text_width", 0.0),
            field(76, "count", 0, required=True, count_of="vertex_x"),
            point(10, "vertex", repeated=True),
            field(77, "color", COLOR_BYLAYER),
            field(340, "annotation_handle", ""),
            _extrusion(),
            point(211, "horizontal_direction", (1.0, 0.0, 0.0)),
            point(212, "block_offset"),
            point(213, "annotation_offset"),
        ),
        _entity(
            "TOLERANCE",
            marker("AcDbFcf"),
            field(3, "dimstyle", DEFAULT_TEXTSTYLE, required=True),
            point(10, "insert", required=True),
            field(1, "text", "", required=True),
            _extrusion(),
            point(11, "x_direction", (1.0, 0.0, 0.0)),
        ),
        _entity(
            "IMAGE",
            marker("AcDbRasterImage"),
            field(90, "class_version", 0, required=True),
            point(10, "insert", required=True),
            point(11, "u_pixel", (1.0, 0.0, 0.0), required=True),
            point(12, "v_pixel", (0.0, 1.0, 0.0), required=True),
            point(13, "image_size", (1.0, 1.0), required=True),
            field(340, "imagedef_handle", ""),
            field(70, "display_flags", 7),
            field(280, "clipping", 0),
            field(281, "brightness", 50),
            field(282, "contrast", 50),
            field(283, "fade", 0),
            field(360, "imagedef_reactor_handle", ""),
            field(71, "boundary_type", 1),
            field(91, "boundary_count", 0, required=True, count_of="boundary_x"),
            point(14, "boundary", (0.0, 0.0), repeated=True),
        ),
        _entity(
            "OLE2FRAME",
            marker("AcDbOle2Frame"),
            field(70, "version", 2, required=True),
            field(3, "length_label", ""),
            point(10, "upper_left", required=True),
            point(11, "lower_right", required=True),
            field(71, "object_type", 2),
            field(72, "tilemode", 0),
            field(90, "length", 0, required=True),
            field(310, "binary_data", repeated=True),
            field(1, "end_marker", "OLE"),
        ),
        _symbol(
            "LAYER",
            marker("AcDbLayerTableRecord"),
            field(2, "name", "", identifier=True),
            field(70, "flags", 0, required=True),
            field(62, "color", 7, required=True),
            field(6, "linetype", "CONTINUOUS", required=True),
            field(290, "plot", True, min_version=V.AC1015),
            field(370, "lineweight", -3, min_version=V.AC1015),
            field(390, "plotstyle_handle", "", min_version=V.AC1015),
            field(347, "material_handle", "", min_version=V.AC1021),
        ),
        _symbol(
            "STYLE",
            marker("AcDbTextStyleTableRecord"),
            field(2, "name", "", identifier=True),
            field(70, "flags", 0, required=True),
            field(40, "height", 0.0, required=True),
            field(41, "width", 1.0, required=True),
            field(50, "oblique", 0.0),
            field(71, "generation_flags", 0),
            field(42, "last_height", 2.5, required=True),
            field(3, "font", "txt", required=True),
            field(4, "bigfont", ""),
        ),
        _symbol(
            "APPID",
            marker("AcDbRegAppTableRecord"),
            field(2, "name", "", identifier=True),
            field(70, "flags", 0, required=True),
        ),
        _symbol(
            "LTYPE",
            marker("AcDbLinetypeTableRecord"),
            field(2, "name", "", identifier=True),
            field(70, "flags", 0, required=True),
            field(3, "description", "", required=True),
            field(72, "alignment", 65, required=True),
            field(73, "count", 0, required=True, count_of="dash_length"),
            field(40, "pattern_length", 0.0, required=True),
            field(49, "dash_length", 0.0, repeated=True, group="dash"),
            field(74, "dash_type", 0, repeated=True, group="dash", min_version=V.AC1012),
            field(75, "shape_number", 0, repeated=True, group="dash", min_version=V.AC1012),
            field(340, "style_handle", "", repeated=True, group="dash", min_version=V.AC1012),
            field(46, "dash_scale", 1.0, repeated=True, group="dash", min_version=V.AC1012),
            field(50, "dash_rotation", 0.0, repeated=True, group="dash", min_version=V.AC1012),
            field(44, "dash_x_offset", 0.0, repeated=True, group="dash", min_version=V.AC1012),
            field(45, "dash_y_offset", 0.0, repeated=True, group="dash", min_version=V.AC1012),
            field(9, "dash_text", "", repeated=True, group="dash", min_version=V.AC1012),
        ),
        _symbol(
            "VPORT",
            marker("AcDbViewportTableRecord"),
            field(2, "name", "", identifier=True),
            field(70, "flags", 0, required=True),
            point(10, "lower_left", (0.0, 0.0), required=True),
            point(11, "upper_right", (1.0, 1.0), required=True),
            point(12, "center", (0.0, 0.0), required=True),
            point(13, "snap_base", (0.0, 0.0)),
            point(14, "snap_spacing", (1.0, 1.0)),
            point(15, "grid_spacing", (1.0, 1.0)),
            point(16, "view_direction", (0.0, 0.0, 1.0)),
            point(17, "view_target"),
            field(40, "view_height", 1.0, required=True),
            field(41, "aspect_ratio", 1.0, required=True),
            field(42, "lens_length", 50.0),
            field(43, "front_clip", 0.0),
            field(44, "back_clip", 0.0),
            field(50, "snap_rotation", 0.0),
            field(51, "view_twist", 0.0),
            field(71, "view_mode", 0),
            field(72, "circle_zoom", 100),
            field(73, "fast_zoom", 1),
            field(74, "ucs_icon", 3),
            field(75, "snap_on", 0),
            field(76, "grid_on", 0),
            field(77, "snap_style", 0),
            field(78, "snap_isopair", 0),
        ),
        _symbol(
            "UCS",
            marker("AcDbUCSTableRecord"),
            field(2, "name", "", identifier=True),
            field(70, "flags", 0, required=True),
            point(10, "origin", required=True),
            point(11, "x_axis", (1.0, 0.0, 0.0), required=True),
            point(12, "y_axis", (0.0, 1.0, 0.0), required=True),
        ),
        _symbol(
            "VIEW",
            marker("AcDbViewTableRecord"),
            field(2, "name", "", identifier=True),
            field(70, "flags", 0, required=True),
            field(40, "height", 1.0, required=True),
            point(10, "center", (0.0, 0.0), required=True),
            field(41, "width", 1.0, required=True),
            point(11, "direction", (0.0, 0.0, 1.0), required=True),
            point(12, "target"),
            field(42, "lens_length", 50.0),
            field(43, "front_clip", 0.0),
            field(44, "back_clip", 0.0),
            field(50, "twist", 0.0),
            field(71, "view_mode", 0),
        ),
        _symbol(
            "BLOCK_RECORD",
            marker("AcDbBlockTableRecord"),
            field(2, "name", "", identifier=True),
            field(340, "layout_handle", "", min_version=V.AC1015),
            field(70, "insert_units", 0, min_version=V.AC1018),
            field(280, "explodable", 1, min_version=V.AC1018),
            field(281, "scalable", 0, min_version=V.AC1018),
        ),
        EntitySchema(
            "DIMSTYLE",
            _ownership(handle_code=105) + [marker("AcDbSymbolTableRecord")],
            [
                marker("AcDbDimStyleTableRecord"),
                field(2, "name", "", identifier=True),
                field(70, "flags", 0, required=True),
                field(3, "dimpost", ""),
                field(4, "dimapost", ""),
                field(40, "dimscale", 1.0),
                field(41, "dimasz", 0.18),
                field(42, "dimexo", 0.0625),
                field(43, "dimdli", 0.38),
                field(44, "dimexe", 0.18),
                field(45, "dimrnd", 0.0),
                field(46, "dimdle", 0.0),
                field(47, "dimtp", 0.0),
                field(48, "dimtm", 0.0),
                field(140, "dimtxt", 0.18),
                field(141, "dimcen", 0.09),
                field(142, "dimtsz", 0.0),
                field(143, "dimaltf", 25.4),
                field(144, "dimlfac", 1.0),
                field(145, "dimtvp", 0.0),
                field(146, "dimtfac", 1.0),
                field(147, "dimgap", 0.09),
                field(71, "dimtol", 0),
                field(72, "dimlim", 0),
                field(73, "dimtih", 1),
                field(74, "dimtoh", 1),
                field(75, "dimse1", 0),
                field(76, "dimse2", 0),
                field(77, "dimtad", 0),
                field(78, "dimzin", 0),
                field(170, "dimalt", 0),
                field(171, "dimaltd", 2),
                field(172, "dimtofl", 0),
                field(173, "dimsah", 0),
                field(174, "dimtix", 0),
                field(175, "dimsoxd", 0),
                field(176, "dimclrd", 0),
                field(177, "dimclre", 0),
                field(178, "dimclrt", 0),
            ],
        ),
    ]
    return schemas


SYMBOL_TABLE_TYPES = ("APPID", "BLOCK_RECORD", "DIMSTYLE", "LAYER", "LTYPE", "STYLE", "UCS", "VIEW", "VPORT")
