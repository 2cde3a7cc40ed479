"""
Base Firestore service with common document operations
"""
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from firebase_admin import firestore

from ...core.exceptions import FirestoreException

logger = logging.getLogger(__name__)


class FirestoreBaseService:
    """Base service for Firestore operations on one collection"""
    
    def __init__(self, db, collection_name: str):
        """
        Initialize base service
        
        Args:
            db: Firestore client
            collection_name: Name of the Firestore collection
        """
        self.collection_name = collection_name
        self.db = db
        self.collection = db.collection(collection_name)
    
    def _storage_error(self, action: str, error: Exception, default_message: str) -> FirestoreException:
        logger.error(f"Error {action} in {self.collection_name}: {error}")
        return FirestoreException(str(error) or default_message)
    
    async def get_document(self, doc_id: str, default_message: str = "Failed to read document") -> Optional[Dict[str, Any]]:
        """
        Get a document by ID
        
        Returns:
            Document data, or None when the document does not exist
            
        Raises:
            FirestoreException: If the read fails
        """
        try:
            doc = self.collection.document(doc_id).get()
        except Exception as e:
            raise self._storage_error(f"reading document {doc_id}", e, default_message)
        
        if not doc.exists:
            logger.debug(f"Document {doc_id} not found in {self.collection_name}")
            return None
        return doc.to_dict() or {}
    
    async def set_document(
        self,
        doc_id: str,
        data: Dict[str, Any],
        merge: bool = False,
        default_message: str = "Failed to save document"
    ) -> str:
        """
        Write a document at a known ID
        
        Args:
            doc_id: Document ID
            data: Fields to write; Firestore transforms (Increment, ArrayUnion,
                SERVER_TIMESTAMP) are applied server side
            merge: Merge into an existing document instead of replacing it
            
        Raises:
            FirestoreException: If the write fails
        """
        try:
            self.collection.document(doc_id).set(data, merge=merge)
        except Exception as e:
            raise self._storage_error(f"writing document {doc_id}", e, default_message)
        
        logger.info(f"Saved document {doc_id} in {self.collection_name}")
        return doc_id
    
    async def add_document(
        self,
        build: Callable[[str], Dict[str, Any]],
        default_message: str = "Failed to create document"
    ) -> str:
        """
        Create a document with a generated ID
        
        Args:
            build: Called with the generated ID, returns the document data
            
        Returns:
            The generated document ID
        """
        try:
            doc_ref = self.collection.document()
            doc_ref.set(build(doc_ref.id))
        except Exception as e:
            raise self._storage_error("creating document", e, default_message)
        
        logger.info(f"Created document {doc_ref.id} in {self.collection_name}")
        return doc_ref.id
    
    async def query(
        self,
        filters: List[Tuple[str, str, Any]],
        order_by: Optional[str] = None,
        direction: str = firestore.Query.ASCENDING,
        limit: Optional[int] = None,
        default_message: str = "Failed to query documents"
    ) -> List[Dict[str, Any]]:
        """
        Query documents with custom filters
        
        Args:
            filters: List of (field, operator, value) tuples
            order_by: Field to order by
            direction: Sort direction for order_by
            limit: Maximum number of results
            
        Returns:
            List of matching documents, each with its ``id``
            
        Raises:
            FirestoreException: If query fails
        """
        try:
            query = self.collection
            
            for field, operator, value in filters:
                query = query.where(field, operator, value)
            
            if order_by:
                query = query.order_by(order_by, direction=direction)
            
            if limit:
                query = query.limit(limit)
            
            results = []
            for doc in query.stream():
                results.append({"id": doc.id, **(doc.to_dict() or {})})
        except Exception as e:
            raise self._storage_error("querying", e, default_message)
        
        logger.info(f"Query returned {len(results)} documents from {self.collection_name}")
        return results
