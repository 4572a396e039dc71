"""
Known C# type names for Unity projects.

Stands in for reflection over a running editor: a static catalog of common
UnityEngine types with their base types, so subtype listing works.
"""

from typing import List, Optional, Tuple

from ...core.resolver import StaticTypeResolver, TypeHandle, load_type_catalog

UNITY_NAMESPACE = "UnityEngine"

# (name, base) pairs, base None for value types and roots
UNITY_ENGINE_TYPES: List[Tuple[str, Optional[str]]] = [
    ("Object", None),
    ("Component", "Object"),
    ("Behaviour", "Component"),
    ("MonoBehaviour", "Behaviour"),
    ("ScriptableObject", "Object"),
    ("GameObject", "Object"),
    ("Transform", "Component"),
    ("RectTransform", "Transform"),
    ("Rigidbody", "Component"),
    ("Rigidbody2D", "Component"),
    ("Collider", "Component"),
    ("BoxCollider", "Collider"),
    ("SphereCollider", "Collider"),
    ("CapsuleCollider", "Collider"),
    ("MeshCollider", "Collider"),
    ("Collider2D", "Behaviour"),
    ("BoxCollider2D", "Collider2D"),
    ("CircleCollider2D", "Collider2D"),
    ("Renderer", "Component"),
    ("MeshRenderer", "Renderer"),
    ("SpriteRenderer", "Renderer"),
    ("LineRenderer", "Renderer"),
    ("Camera", "Behaviour"),
    ("Light", "Behaviour"),
    ("Animator", "Behaviour"),
    ("AudioSource", "Behaviour"),
    ("Sprite", "Object"),
    ("Texture", "Object"),
    ("Texture2D", "Texture"),
    ("RenderTexture", "Texture"),
    ("Material", "Object"),
    ("Shader", "Object"),
    ("Mesh", "Object"),
    ("AudioClip", "Object"),
    ("AnimationClip", "Object"),
    ("Vector2", None),
    ("Vector3", None),
    ("Vector4", None),
    ("Vector2Int", None),
    ("Vector3Int", None),
    ("Quaternion", None),
    ("Color", None),
    ("Color32", None),
    ("Rect", None),
    ("Bounds", None),
    ("LayerMask", None),
    ("AnimationCurve", None),
    ("Gradient", None),
]


def unity_type_handles() -> List[TypeHandle]:
    """TypeHandles for the built-in UnityEngine catalog."""
    return [
        TypeHandle(name=name, namespace=UNITY_NAMESPACE, base=base)
        for name, base in UNITY_ENGINE_TYPES
    ]


def create_unity_resolver(catalogs: Optional[List[str]] = None) -> StaticTypeResolver:
    """
    Create a resolver preloaded with common UnityEngine types.

    Args:
        catalogs: Extra type catalog files or URLs, loaded in order

    Returns:
        Resolver with the built-in and extra types
    """
    resolver = StaticTypeResolver(unity_type_handles())
    for catalog in catalogs or []:
        load_type_catalog(catalog, resolver)
    return resolver
