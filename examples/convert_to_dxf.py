import dxfcodec


result = dxfcodec.to_dxf(
    "examples/data/sample_r2000.dxf",
    "/tmp/sample_r2000_out.dxf",
    types="LINE ARC LWPOLYLINE",
    dxf_version="R2010",
)
print(result)
